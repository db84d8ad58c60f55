"""Credential stores: where passed assessments become validated skills.

The assessment session only ever calls ``add_validated_skill``; hosts plug in
their own persistence by subclassing CredentialStore.
"""

import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from src.core.skills import skill_key
from src.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    """A profile's set of validated skills."""

    @abstractmethod
    def add_validated_skill(self, skill: str) -> bool:
        """Idempotently add ``skill``.

        Returns True if the skill was newly validated, False if it was
        already present (re-confirmed). Never raises on a re-add.
        """

    @abstractmethod
    def validated_skills(self) -> list[str]:
        """Validated skills in the order they were first issued."""

    def is_validated(self, skill: str) -> bool:
        key = skill_key(skill)
        return any(skill_key(s) == key for s in self.validated_skills())


class InMemoryCredentialStore(CredentialStore):
    """Lock-guarded in-process store.

    The membership check and insert happen under one lock, so concurrent
    passes for the same skill issue it exactly once.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._skills: dict[str, str] = {}
        for skill in initial:
            key = skill_key(skill)
            if key:
                self._skills.setdefault(key, skill.strip())

    def add_validated_skill(self, skill: str) -> bool:
        key = skill_key(skill)
        if not key:
            msg = "skill must not be empty"
            raise ValueError(msg)
        with self._lock:
            if key in self._skills:
                logger.debug("Skill '%s' already validated - re-confirmed", skill)
                return False
            self._skills[key] = skill.strip()
        logger.info("Validated skill issued: %s", skill)
        return True

    def validated_skills(self) -> list[str]:
        with self._lock:
            return list(self._skills.values())


class ProfileCredentialStore(CredentialStore):
    """Writes validated skills back into a profile YAML file.

    Only the file's ``validated_skills`` key is touched; every other key the
    host keeps there survives. Stores for the same file share one lock, and
    each write lands atomically through a temp file and ``os.replace``.
    """

    _locks: dict[Path, threading.Lock] = {}
    _locks_guard = threading.Lock()

    def __init__(self, profile_path: str | Path) -> None:
        self._path = Path(profile_path)

    def _lock(self) -> threading.Lock:
        key = self._path.resolve()
        with ProfileCredentialStore._locks_guard:
            return ProfileCredentialStore._locks.setdefault(key, threading.Lock())

    def _read_raw(self) -> dict[str, Any]:
        if not self._path.exists():
            msg = f"Profile file not found: {self._path}"
            raise FileNotFoundError(msg)
        raw = yaml.safe_load(self._path.read_text()) or {}
        if not isinstance(raw, dict):
            msg = f"Profile file must contain a mapping: {self._path}"
            raise ValueError(msg)
        return raw

    def _write_raw(self, raw: dict[str, Any]) -> None:
        fd, tmp = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w") as fh:
                yaml.dump(raw, fh, default_flow_style=False, sort_keys=False)
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def add_validated_skill(self, skill: str) -> bool:
        if not skill_key(skill):
            msg = "skill must not be empty"
            raise ValueError(msg)
        with self._lock():
            raw = self._read_raw()
            profile = CandidateProfile.model_validate(raw)
            current = InMemoryCredentialStore(profile.validated_skills)
            added = current.add_validated_skill(skill)
            if added:
                raw["validated_skills"] = current.validated_skills()
                self._write_raw(raw)
        return added

    def validated_skills(self) -> list[str]:
        with self._lock():
            return CandidateProfile.model_validate(self._read_raw()).validated_skills
