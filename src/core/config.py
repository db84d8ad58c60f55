"""Configuration models and YAML loader for the matching engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


class ScoringConfig(BaseModel):
    """Weights for the additive candidate/listing match score."""

    contract_match_bonus: int = Field(default=50, ge=0)
    full_time_match_bonus: int = Field(default=30, ge=0)
    skill_match_bonus: int = Field(default=20, ge=0)
    validated_skill_bonus: int = Field(default=30, ge=0)
    experience_match_bonus: int = Field(default=15, ge=0)
    experience_tolerance_years: float = Field(default=2.0, ge=0.0)
    featured_bonus: int = Field(default=10, ge=0)
    location_match_bonus: int = Field(default=25, ge=0)
    contract_keywords: list[str] = Field(
        default_factory=lambda: ["contract", "temporary", "freelance"],
    )
    full_time_keywords: list[str] = Field(default_factory=lambda: ["full-time"])

    @field_validator("contract_keywords", "full_time_keywords")
    @classmethod
    def keywords_lowercased(cls, v: list[str]) -> list[str]:
        cleaned = [kw.lower().strip() for kw in v if kw.strip()]
        if not cleaned:
            msg = "employment type keywords must not be empty"
            raise ValueError(msg)
        return cleaned


class AssessmentConfig(BaseModel):
    """Skill assessment settings."""

    pass_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    catalog_path: str | None = None


class RankingConfig(BaseModel):
    """Ranking output settings."""

    default_limit: int = Field(default=10, ge=1)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    assessment: AssessmentConfig = Field(default_factory=AssessmentConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
