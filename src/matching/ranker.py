"""Rank listings for a candidate, or candidates for a listing.

Ties keep their input order: ``sorted`` is stable, including with
``reverse=True``.
"""

import logging
from collections.abc import Iterable

from src.core.config import RankingConfig, ScoringConfig
from src.core.errors import InvalidArgumentError
from src.core.schemas import JobListing, ScoredCandidate, ScoredListing
from src.matching.scorer import score
from src.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)

_DEFAULT_RANKING = RankingConfig()


def _resolve_limit(limit: int | None, ranking: RankingConfig | None) -> int:
    if limit is None:
        return (ranking or _DEFAULT_RANKING).default_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        msg = f"limit must be a non-negative integer, got {limit!r}"
        raise InvalidArgumentError(msg)
    return limit


def rank(
    candidate: CandidateProfile,
    listings: Iterable[JobListing],
    limit: int | None = None,
    config: ScoringConfig | None = None,
    ranking: RankingConfig | None = None,
    min_score: int = 0,
) -> list[ScoredListing]:
    """Score every listing for ``candidate`` and return the top ``limit``, best first.

    Args:
        candidate: Profile to score against.
        listings: Listings to rank; never mutated.
        limit: Maximum number of results; None uses ``ranking.default_limit``.
        config: Scoring weights.
        ranking: Ranking settings, consulted only when ``limit`` is None.
        min_score: Results scoring below this are dropped before truncation.

    Returns:
        A new list of at most ``limit`` ScoredListing, sorted by score desc.
    """
    limit = _resolve_limit(limit, ranking)
    scored = [
        ScoredListing(listing=listing, score=score(candidate, listing, config))
        for listing in listings
    ]
    kept = [s for s in scored if s.score >= min_score]
    kept.sort(key=lambda s: s.score, reverse=True)
    logger.debug(
        "Ranked %d listings (%d above min_score %d), returning top %d",
        len(scored), len(kept), min_score, limit,
    )
    return kept[:limit]


def rank_candidates(
    listing: JobListing,
    candidates: Iterable[CandidateProfile],
    limit: int | None = None,
    config: ScoringConfig | None = None,
    ranking: RankingConfig | None = None,
    min_score: int = 0,
) -> list[ScoredCandidate]:
    """Employer-side ranking: the best candidates for ``listing``, best first."""
    limit = _resolve_limit(limit, ranking)
    scored = [
        ScoredCandidate(candidate=c, score=score(c, listing, config)) for c in candidates
    ]
    kept = [s for s in scored if s.score >= min_score]
    kept.sort(key=lambda s: s.score, reverse=True)
    logger.debug(
        "Ranked %d candidates for listing %s, returning top %d",
        len(scored), listing.id, limit,
    )
    return kept[:limit]
