"""Case-insensitive skill name helpers."""

from collections.abc import Iterable


def skill_key(skill: str) -> str:
    """Comparison key for a skill name ("React " and "react" are equal)."""
    return skill.strip().lower()


def dedupe_skills(skills: Iterable[str]) -> list[str]:
    """Drop blank and case-insensitive duplicate skills, keeping first spelling and order."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        key = skill_key(skill)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(skill.strip())
    return result


def skill_keys(skills: Iterable[str]) -> set[str]:
    return {skill_key(s) for s in skills if s.strip()}
