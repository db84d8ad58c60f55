"""CandidateProfile model for profile YAML files."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.skills import dedupe_skills


class CandidateProfile(BaseModel):
    """The parts of a candidate profile that matching reads."""

    name: str = ""
    skills: list[str] = Field(default_factory=list)
    validated_skills: list[str] = Field(default_factory=list)
    experience_years: int | float | str | None = None
    location: str | None = None
    contract_preference: bool = False

    @field_validator(
        "name", "skills", "validated_skills", "contract_preference", mode="before",
    )
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Null fields count as absent and take the field default."""
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v

    @field_validator("skills", "validated_skills")
    @classmethod
    def skills_deduplicated(cls, v: list[str]) -> list[str]:
        return dedupe_skills(v)

    def with_validated_skills(self, skills: Iterable[str]) -> "CandidateProfile":
        """Return a copy whose validated skills are replaced by ``skills``."""
        return self.model_copy(update={"validated_skills": dedupe_skills(skills)})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CandidateProfile":
        """Load profile from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Profile file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write profile to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump()
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))
