"""Rule-based match scoring between a candidate profile and a job listing.

Additive and unbounded: every signal is evaluated independently and the
bonuses are summed. The number only has meaning relative to other scores
for the same candidate.
"""

import logging
import math
import re

from pydantic import BaseModel, ConfigDict

from src.core.config import ScoringConfig
from src.core.schemas import JobListing
from src.core.skills import skill_key, skill_keys
from src.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_DEFAULT_CONFIG = ScoringConfig()


class ScoreBreakdown(BaseModel):
    """Per-signal contributions to a match score."""

    model_config = ConfigDict(frozen=True)

    employment_type: int = 0
    skills: int = 0
    validated_skills: int = 0
    experience: int = 0
    featured: int = 0
    location: int = 0
    matched_skills: list[str] = []

    @property
    def total(self) -> int:
        return (
            self.employment_type
            + self.skills
            + self.validated_skills
            + self.experience
            + self.featured
            + self.location
        )


def parse_years(value: int | float | str | None) -> int | None:
    """Read whole years of experience; None when it isn't a usable number.

    Numbers and strings follow one rule: the integer part counts, so 4.9,
    "4.9" and "4-6 years" all read as 4.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return None if math.isnan(value) or math.isinf(value) else int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def matched_skills(candidate: CandidateProfile, listing: JobListing) -> list[str]:
    """Listing skills the candidate has, in listing order and spelling."""
    have = skill_keys(candidate.skills)
    return [s for s in listing.skills if skill_key(s) in have]


def explain(
    candidate: CandidateProfile,
    listing: JobListing,
    config: ScoringConfig | None = None,
) -> ScoreBreakdown:
    """Compute each signal's contribution for a candidate/listing pair."""
    config = config or _DEFAULT_CONFIG
    employment_type = listing.employment_type.lower()

    # Employment type alignment
    type_bonus = 0
    if candidate.contract_preference:
        if any(kw in employment_type for kw in config.contract_keywords):
            type_bonus = config.contract_match_bonus
    elif any(kw in employment_type for kw in config.full_time_keywords):
        type_bonus = config.full_time_match_bonus

    # Skill overlap, with an extra bonus for validated matches
    matches = matched_skills(candidate, listing)
    validated = skill_keys(candidate.validated_skills)
    validated_count = sum(1 for s in matches if skill_key(s) in validated)

    # Experience proximity
    experience_bonus = 0
    candidate_years = parse_years(candidate.experience_years)
    listing_years = parse_years(listing.experience_years)
    if candidate_years is not None and listing_years is not None:
        if abs(candidate_years - listing_years) <= config.experience_tolerance_years:
            experience_bonus = config.experience_match_bonus

    # Location substring match
    location_bonus = 0
    wanted = (candidate.location or "").strip().lower()
    if wanted and wanted in listing.location.lower():
        location_bonus = config.location_match_bonus

    return ScoreBreakdown(
        employment_type=type_bonus,
        skills=len(matches) * config.skill_match_bonus,
        validated_skills=validated_count * config.validated_skill_bonus,
        experience=experience_bonus,
        featured=config.featured_bonus if listing.featured else 0,
        location=location_bonus,
        matched_skills=matches,
    )


def score(
    candidate: CandidateProfile,
    listing: JobListing,
    config: ScoringConfig | None = None,
) -> int:
    """Match score for a candidate/listing pair. Pure and deterministic."""
    breakdown = explain(candidate, listing, config)
    logger.debug("Listing %s scored %d: %s", listing.id, breakdown.total, breakdown)
    return breakdown.total
