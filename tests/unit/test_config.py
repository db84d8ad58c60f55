"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from src.core.config import AssessmentConfig, RankingConfig, ScoringConfig, Settings


class TestScoringConfig:
    def test_defaults(self) -> None:
        s = ScoringConfig()
        assert s.contract_match_bonus == 50
        assert s.full_time_match_bonus == 30
        assert s.skill_match_bonus == 20
        assert s.validated_skill_bonus == 30
        assert s.experience_match_bonus == 15
        assert s.experience_tolerance_years == 2.0
        assert s.featured_bonus == 10
        assert s.location_match_bonus == 25
        assert s.contract_keywords == ["contract", "temporary", "freelance"]
        assert s.full_time_keywords == ["full-time"]

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringConfig(skill_match_bonus=-1)

    def test_keywords_lowercased(self) -> None:
        s = ScoringConfig(contract_keywords=[" Contract ", "", "Gig"])
        assert s.contract_keywords == ["contract", "gig"]

    def test_empty_keywords_rejected(self) -> None:
        with pytest.raises(ValidationError, match="keywords must not be empty"):
            ScoringConfig(full_time_keywords=[" "])


class TestAssessmentConfig:
    def test_defaults(self) -> None:
        a = AssessmentConfig()
        assert a.pass_threshold == 70.0
        assert a.catalog_path is None

    def test_threshold_bounds(self) -> None:
        with pytest.raises(ValidationError):
            AssessmentConfig(pass_threshold=101)
        with pytest.raises(ValidationError):
            AssessmentConfig(pass_threshold=-1)


class TestRankingConfig:
    def test_default_limit(self) -> None:
        assert RankingConfig().default_limit == 10

    def test_min_one(self) -> None:
        with pytest.raises(ValidationError):
            RankingConfig(default_limit=0)


class TestSettings:
    def test_all_sections_default(self) -> None:
        s = Settings()
        assert s.scoring == ScoringConfig()
        assert s.ranking.default_limit == 10

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(dedent("""\
            scoring:
              skill_match_bonus: 25
              contract_keywords: [contract]
            assessment:
              pass_threshold: 80
              catalog_path: config/questions.yaml
            ranking:
              default_limit: 5
        """))
        s = Settings.from_yaml(path)
        assert s.scoring.skill_match_bonus == 25
        assert s.scoring.validated_skill_bonus == 30
        assert s.scoring.contract_keywords == ["contract"]
        assert s.assessment.pass_threshold == 80.0
        assert s.assessment.catalog_path == "config/questions.yaml"
        assert s.ranking.default_limit == 5

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert Settings.from_yaml(path) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Settings.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("ranking:\n  default_limit: 0\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(path)
