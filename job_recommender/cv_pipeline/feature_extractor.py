"""Vocabulary-based resume feature extraction: skills, experience mentions, title keywords."""

import re
from typing import List, Optional

from job_recommender.cv_pipeline.vocabulary import Vocabulary, get_vocabulary
from job_recommender.schemas.resume_features import ResumeFeatures

# "5+ years of experience", "3 years experience", "10 year experience"
EXPERIENCE_PATTERN = re.compile(r"\d+\s*\+?\s*years?\s*(?:of)?\s*experience", re.IGNORECASE)


def _contained_terms(text: str, terms) -> List[str]:
    """Terms that occur in text as substrings, in term order."""
    return [t for t in terms if t in text]


def extract_skills(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    if not text:
        return []
    vocab = vocabulary or get_vocabulary()
    return list(dict.fromkeys(_contained_terms(text.lower(), vocab.skills)))


def extract_experience_mentions(text: str) -> List[str]:
    if not text:
        return []
    return [m.group(0) for m in EXPERIENCE_PATTERN.finditer(text)]


def extract_titles(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    if not text:
        return []
    vocab = vocabulary or get_vocabulary()
    return _contained_terms(text.lower(), vocab.titles)


def extract_resume_features(text: Optional[str], vocabulary: Optional[Vocabulary] = None) -> ResumeFeatures:
    """
    Extract structured features from normalized resume text.
    Pure and total: empty or missing text gives an all-empty record.
    """
    if not text or not text.strip():
        return ResumeFeatures()
    vocab = vocabulary or get_vocabulary()
    return ResumeFeatures(
        skills=extract_skills(text, vocab),
        experience_mentions=extract_experience_mentions(text),
        titles=extract_titles(text, vocab),
        raw_text=text,
    )
