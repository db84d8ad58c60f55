"""Core data models for the matching engine."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from src.core.skills import dedupe_skills
from src.profile.schema import CandidateProfile


class Question(BaseModel):
    """A single multiple-choice question in a skill's assessment bank."""

    model_config = ConfigDict(frozen=True)

    id: int
    skill: str
    prompt: str
    options: list[str] = Field(min_length=2)
    correct_answer: int = Field(ge=0)

    @field_validator("skill")
    @classmethod
    def skill_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "skill must not be empty"
            raise ValueError(msg)
        return v.strip()

    @model_validator(mode="after")
    def correct_answer_in_range(self) -> "Question":
        if self.correct_answer >= len(self.options):
            msg = (
                f"correct_answer {self.correct_answer} out of range "
                f"for {len(self.options)} options"
            )
            raise ValueError(msg)
        return self


class JobListing(BaseModel):
    """A job posting as supplied by the listing provider.

    Frozen. Scores live on the ScoredListing wrapper, never on the listing.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    title: str = ""
    company: str = ""
    skills: list[str] = Field(default_factory=list)
    experience_years: int | float | str | None = None
    location: str = ""
    employment_type: str = ""
    featured: bool = False

    @field_validator(
        "title", "company", "skills", "location", "employment_type", "featured", mode="before",
    )
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Null fields count as absent and take the field default."""
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v

    @field_validator("skills")
    @classmethod
    def skills_deduplicated(cls, v: list[str]) -> list[str]:
        return dedupe_skills(v)


class ScoredListing(BaseModel):
    """Wrapper that pairs a frozen JobListing with its match score."""

    model_config = ConfigDict(frozen=True)

    listing: JobListing
    score: int = Field(default=0, ge=0)


class ScoredCandidate(BaseModel):
    """Employer-side counterpart of ScoredListing."""

    model_config = ConfigDict(frozen=True)

    candidate: CandidateProfile
    score: int = Field(default=0, ge=0)


class AssessmentResult(BaseModel):
    """Outcome of one completed assessment attempt.

    ``newly_validated`` is None on a fail, True when the pass issued the
    credential and False when it re-confirmed an existing one.
    """

    model_config = ConfigDict(frozen=True)

    skill: str
    correct: int = Field(ge=0)
    total: int = Field(ge=1)
    passed: bool
    percentage: float
    newly_validated: bool | None = None
