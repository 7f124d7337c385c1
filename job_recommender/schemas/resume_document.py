"""Reference to a stored resume file."""

import os
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from job_recommender.config import RESUME_EXTENSIONS


class ResumeFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    TXT = "txt"
    UNSUPPORTED = "unsupported"


def detect_format(path: str) -> ResumeFormat:
    """Format from the file extension (case-insensitive); URLs are judged by their path part."""
    if not path:
        return ResumeFormat.UNSUPPORTED
    local = urlparse(path).path if "://" in path else path
    ext = os.path.splitext(local)[1].lower()
    return ResumeFormat(RESUME_EXTENSIONS.get(ext, ResumeFormat.UNSUPPORTED.value))


class ResumeDocument(BaseModel):
    """A resume identified by its storage path. Content is owned by the storage layer."""

    path: str = Field(..., description="Storage path, /uploads/... URL path, or http(s) URL")
    format: ResumeFormat = Field(default=ResumeFormat.UNSUPPORTED, description="Derived from the extension")

    @classmethod
    def from_path(cls, path: str) -> "ResumeDocument":
        return cls(path=path, format=detect_format(path))
