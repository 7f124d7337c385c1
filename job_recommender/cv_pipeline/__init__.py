"""Resume pipeline: text extraction (PDF/DOCX/TXT), normalization, vocabulary feature extraction."""

from .feature_extractor import extract_resume_features
from .text_extractor import (
    TextExtractor,
    clean_resume_text,
    extract_resume_text,
    extract_resume_text_async,
    get_text_extractor,
)
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary, get_vocabulary, load_vocabulary

__all__ = [
    "extract_resume_features",
    "extract_resume_text",
    "extract_resume_text_async",
    "clean_resume_text",
    "get_text_extractor",
    "TextExtractor",
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    "get_vocabulary",
    "load_vocabulary",
]
