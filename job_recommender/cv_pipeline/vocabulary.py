"""Skill and job-title vocabularies used for resume feature extraction.

A built-in default is compiled in; a versioned JSON file can replace it:

    {"version": "2025.1", "skills": ["python", "rust"], "titles": ["engineer"]}

Keys left out of the file keep the built-in lists.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from job_recommender.config import SKILL_VOCABULARY_PATH
from job_recommender.errors import VocabularyError
from job_recommender.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_VERSION = "builtin-1"

DEFAULT_SKILLS: Tuple[str, ...] = (
    # languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
    # frameworks
    "react", "angular", "vue", "node", "express", "django", "flask", "spring", "laravel",
    "html", "css", "sass", "tailwind", "bootstrap", "jquery",
    # data stores
    "mongodb", "mysql", "postgresql", "redis", "elasticsearch", "firebase",
    # cloud / devops
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git", "github", "gitlab",
    "machine learning", "deep learning", "artificial intelligence", "data science",
    "agile", "scrum", "jira", "figma", "photoshop", "illustrator",
    "rest api", "graphql", "microservices", "devops", "ci/cd",
    "linux", "windows", "macos", "android", "ios",
    "sql", "nosql", "orm", "api", "frontend", "backend", "fullstack", "full stack",
    "nextjs", "next.js", "nuxt", "gatsby", "webpack", "vite", "npm", "yarn",
    "tensorflow", "pytorch", "keras", "pandas", "numpy", "scikit-learn",
    # soft skills
    "communication", "leadership", "teamwork", "problem solving", "analytical",
)

DEFAULT_TITLES: Tuple[str, ...] = (
    "software engineer", "developer", "programmer", "architect", "designer",
    "manager", "lead", "senior", "junior", "intern", "analyst", "consultant",
    "frontend", "backend", "fullstack", "devops", "data scientist", "ml engineer",
)


class Vocabulary(BaseModel):
    """Immutable term lists; entries are lower-cased and deduplicated in definition order."""

    version: str = Field(default=DEFAULT_VERSION, description="Vocabulary resource version")
    skills: Tuple[str, ...] = Field(default=DEFAULT_SKILLS, description="Recognized skills")
    titles: Tuple[str, ...] = Field(default=DEFAULT_TITLES, description="Recognized title/seniority keywords")

    model_config = ConfigDict(frozen=True)

    @field_validator("skills", "titles", mode="before")
    @classmethod
    def _normalize_terms(cls, v):
        if isinstance(v, str) or not hasattr(v, "__iter__"):
            raise ValueError("expected a list of strings")
        seen = []
        for term in v:
            if not isinstance(term, str):
                raise ValueError(f"vocabulary entries must be strings, got {term!r}")
            t = term.strip().lower()
            if t and t not in seen:
                seen.append(t)
        return tuple(seen)


DEFAULT_VOCABULARY = Vocabulary()


def load_vocabulary(path: str) -> Vocabulary:
    """Load a vocabulary JSON file. Raises VocabularyError if unreadable or malformed."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise VocabularyError(f"Cannot read vocabulary {path}: {e}") from e
    if not isinstance(data, dict):
        raise VocabularyError(f"Vocabulary {path} must be a JSON object")
    try:
        return Vocabulary(**{k: v for k, v in data.items() if k in ("version", "skills", "titles")})
    except ValidationError as e:
        raise VocabularyError(f"Invalid vocabulary {path}: {e}") from e


@lru_cache(maxsize=None)
def get_vocabulary(path: Optional[str] = None) -> Vocabulary:
    """
    Vocabulary from path (or SKILL_VOCABULARY_PATH), falling back to the built-in default.
    Results are cached per path.
    """
    p = path if path is not None else SKILL_VOCABULARY_PATH
    if not p:
        return DEFAULT_VOCABULARY
    try:
        vocab = load_vocabulary(p)
    except VocabularyError as e:
        logger.warning("%s; using built-in vocabulary", e)
        return DEFAULT_VOCABULARY
    logger.info("Loaded vocabulary %s (%s skills, %s titles)", vocab.version, len(vocab.skills), len(vocab.titles))
    return vocab
