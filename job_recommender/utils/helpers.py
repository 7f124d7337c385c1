"""Helper utilities for the job recommender."""

from typing import Iterable, List


def normalize_skill(skill: str) -> str:
    """Case-normalize a skill name for set comparison."""
    return (skill or "").strip().lower()


def normalize_skills(skills: Iterable[str]) -> List[str]:
    """Normalize and deduplicate skill names, keeping first-seen order and dropping blanks."""
    return list(dict.fromkeys(s for s in (normalize_skill(x) for x in skills or []) if s))
