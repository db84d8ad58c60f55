"""Skill catalog: the static registry of assessable skills and their questions.

Loaded once at startup. Nothing in here mutates after construction, so one
catalog can be shared by every assessment session in the process.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from src.assessment.questions import DEFAULT_QUESTIONS
from src.core.config import Settings
from src.core.schemas import Question
from src.core.skills import skill_key

logger = logging.getLogger(__name__)


class SkillCatalog:
    """Ordered question banks keyed by case-insensitive skill name.

    Usage::

        catalog = SkillCatalog.default()
        questions = catalog.questions_for("react")
        if not questions:
            ...  # no assessment available for this skill
    """

    def __init__(self, questions: Iterable[Question]) -> None:
        banks: dict[str, list[Question]] = {}
        names: dict[str, str] = {}
        seen_ids: set[int] = set()
        for question in questions:
            if question.id in seen_ids:
                msg = f"Duplicate question id {question.id}"
                raise ValueError(msg)
            seen_ids.add(question.id)
            key = skill_key(question.skill)
            names.setdefault(key, question.skill)
            banks.setdefault(key, []).append(question)

        self._banks = MappingProxyType({k: tuple(v) for k, v in banks.items()})
        self._names = tuple(names.values())

    @property
    def skills(self) -> tuple[str, ...]:
        """Assessable skills, in the order they first appear in the bank."""
        return self._names

    def questions_for(self, skill: str) -> tuple[Question, ...]:
        """Return the ordered questions for ``skill``; empty for unknown skills."""
        return self._banks.get(skill_key(skill), ())

    def has_assessment(self, skill: str) -> bool:
        return bool(self.questions_for(skill))

    def __len__(self) -> int:
        return sum(len(bank) for bank in self._banks.values())

    @classmethod
    def from_dicts(cls, raw: Iterable[dict[str, Any]]) -> "SkillCatalog":
        return cls(Question.model_validate(item) for item in raw)

    @classmethod
    def default(cls) -> "SkillCatalog":
        """The built-in question bank."""
        return cls.from_dicts(DEFAULT_QUESTIONS)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SkillCatalog":
        """Load a question bank from a YAML file with a top-level ``questions`` list."""
        path = Path(path)
        if not path.exists():
            msg = f"Question bank not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        questions = raw.get("questions")
        if not isinstance(questions, list):
            msg = f"Question bank must define a 'questions' list: {path}"
            raise ValueError(msg)
        catalog = cls.from_dicts(questions)
        logger.info(
            "Loaded %d questions for %d skills from %s",
            len(catalog), len(catalog.skills), path,
        )
        return catalog


def load_catalog(settings: Settings) -> SkillCatalog:
    """Return the configured question bank, or the built-in one."""
    if settings.assessment.catalog_path:
        return SkillCatalog.from_yaml(settings.assessment.catalog_path)
    return SkillCatalog.default()
