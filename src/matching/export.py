"""JSON export of ranking results."""

import json

from src.core.schemas import ScoredCandidate, ScoredListing


def export_listings_json(results: list[ScoredListing]) -> str:
    """Export ranked listings as a JSON string."""
    data = []
    for position, s in enumerate(results, start=1):
        listing = s.listing
        data.append({
            "rank": position,
            "id": listing.id,
            "title": listing.title,
            "company": listing.company,
            "location": listing.location,
            "employment_type": listing.employment_type,
            "skills": listing.skills,
            "featured": listing.featured,
            "score": s.score,
        })
    return json.dumps(data, indent=2)


def export_candidates_json(results: list[ScoredCandidate]) -> str:
    """Export ranked candidates as a JSON string."""
    data = []
    for position, s in enumerate(results, start=1):
        c = s.candidate
        data.append({
            "rank": position,
            "name": c.name,
            "skills": c.skills,
            "validated_skills": c.validated_skills,
            "location": c.location,
            "score": s.score,
        })
    return json.dumps(data, indent=2)
