"""Integration test: assessment pass feeds validated skills back into ranking."""

import json

from src.assessment.catalog import SkillCatalog
from src.assessment.credentials import InMemoryCredentialStore
from src.assessment.session import AssessmentSession, SessionState
from src.core.config import Settings
from src.core.schemas import JobListing
from src.matching.export import export_listings_json
from src.matching.ranker import rank
from src.profile.schema import CandidateProfile


def _listings() -> list[JobListing]:
    return [
        JobListing(
            id=1,
            title="Senior Full Stack Developer",
            skills=["React", "Node.js", "AWS"],
            experience_years="5-8 years",
            location="Bangalore",
            employment_type="Full-time",
            featured=True,
        ),
        JobListing(
            id=2,
            title="Python Backend Engineer",
            skills=["Python", "Docker"],
            experience_years="3-5 years",
            location="Remote",
            employment_type="Full-time",
        ),
        JobListing(
            id=3,
            title="Freelance Data Engineer",
            skills=["Python", "AWS"],
            location="Pune",
            employment_type="Freelance",
        ),
    ]


def _take(session: AssessmentSession, skill: str, answer: int = 0) -> None:
    assert session.select_skill(skill)
    while session.state is SessionState.IN_PROGRESS:
        session.record_answer(answer)
        session.advance()


class TestAssessmentFeedsRanking:
    def test_validated_skill_reorders_results(self) -> None:
        settings = Settings()
        profile = CandidateProfile(
            name="Ravi",
            skills=["React", "Python", "Docker"],
            experience_years=4,
        )
        listings = _listings()

        before = rank(profile, listings, config=settings.scoring)
        # 30 + 20 + 15 + 10 vs 30 + 40 + 15
        assert [(s.listing.id, s.score) for s in before] == [(2, 85), (1, 75), (3, 20)]

        store = InMemoryCredentialStore(profile.validated_skills)
        catalog = SkillCatalog.default()
        session = AssessmentSession(catalog, store, settings.assessment.pass_threshold)
        _take(session, "react")
        assert session.result().passed is True

        profile = profile.with_validated_skills(store.validated_skills())
        after = rank(profile, listings, config=settings.scoring)
        assert [(s.listing.id, s.score) for s in after] == [(1, 105), (2, 85), (3, 20)]

    def test_failed_assessment_leaves_ranking_unchanged(self) -> None:
        profile = CandidateProfile(skills=["Python"])
        listings = _listings()
        store = InMemoryCredentialStore()
        session = AssessmentSession(SkillCatalog.default(), store)
        _take(session, "Python", answer=1)

        assert session.result().passed is False
        updated = profile.with_validated_skills(store.validated_skills())
        assert rank(updated, listings) == rank(profile, listings)

    def test_export_roundtrip(self) -> None:
        profile = CandidateProfile(skills=["Python"], contract_preference=True)
        data = json.loads(export_listings_json(rank(profile, _listings(), limit=1)))
        assert data == [{
            "rank": 1,
            "id": 3,
            "title": "Freelance Data Engineer",
            "company": "",
            "location": "Pune",
            "employment_type": "Freelance",
            "skills": ["Python", "AWS"],
            "featured": False,
            "score": 70,
        }]
