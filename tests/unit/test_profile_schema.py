"""Tests for CandidateProfile schema."""

from pathlib import Path
from textwrap import dedent

import pytest

from src.profile.schema import CandidateProfile


class TestCandidateProfile:
    def test_defaults(self) -> None:
        p = CandidateProfile()
        assert p.name == ""
        assert p.skills == []
        assert p.validated_skills == []
        assert p.experience_years is None
        assert p.location is None
        assert p.contract_preference is False

    def test_skills_deduplicated(self) -> None:
        p = CandidateProfile(skills=["React", "react", "Node.js"], validated_skills=["AWS", "aws"])
        assert p.skills == ["React", "Node.js"]
        assert p.validated_skills == ["AWS"]

    def test_validated_need_not_be_subset(self) -> None:
        p = CandidateProfile(skills=["React"], validated_skills=["Docker"])
        assert p.validated_skills == ["Docker"]

    def test_with_validated_skills_returns_copy(self) -> None:
        original = CandidateProfile(name="Jane", skills=["React"])
        updated = original.with_validated_skills(["React", "REACT"])
        assert updated.validated_skills == ["React"]
        assert original.validated_skills == []
        assert updated.name == "Jane"

    def test_null_fields_take_defaults(self) -> None:
        p = CandidateProfile.model_validate({
            "name": None,
            "skills": None,
            "validated_skills": None,
            "contract_preference": None,
        })
        assert p == CandidateProfile()


class TestProfileYaml:
    def test_roundtrip(self, tmp_path: Path) -> None:
        original = CandidateProfile(
            name="Jane Doe",
            skills=["React", "Node.js"],
            validated_skills=["React"],
            experience_years=5,
            location="Bangalore",
            contract_preference=True,
        )
        path = tmp_path / "profile.yaml"
        original.to_yaml(path)
        assert CandidateProfile.from_yaml(path) == original

    def test_load_minimal(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text(dedent("""\
            name: Ravi
            skills: [Python, AWS]
            experience_years: 3-5 years
        """))
        p = CandidateProfile.from_yaml(path)
        assert p.skills == ["Python", "AWS"]
        assert p.experience_years == "3-5 years"

    def test_to_yaml_creates_parent(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "profile.yaml"
        CandidateProfile().to_yaml(path)
        assert path.exists()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Profile file not found"):
            CandidateProfile.from_yaml(tmp_path / "missing.yaml")

    def test_load_with_null_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text(dedent("""\
            name: Ravi
            skills:
            validated_skills: ~
            location:
            contract_preference: null
        """))
        p = CandidateProfile.from_yaml(path)
        assert p.name == "Ravi"
        assert p.skills == []
        assert p.validated_skills == []
        assert p.location is None
        assert p.contract_preference is False
