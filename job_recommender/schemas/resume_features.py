"""Structured signals pulled out of normalized resume text."""

from typing import List

from pydantic import BaseModel, Field


class ResumeFeatures(BaseModel):
    """Vocabulary-based features of a resume; every field is empty for empty input."""

    skills: List[str] = Field(default_factory=list, description="Recognized skills, deduplicated, vocabulary order")
    experience_mentions: List[str] = Field(
        default_factory=list,
        description="Verbatim 'N+ years of experience' matches in source order",
    )
    titles: List[str] = Field(default_factory=list, description="Recognized title/seniority keywords, vocabulary order")
    raw_text: str = Field(default="", description="Normalized resume text")

    @property
    def is_empty(self) -> bool:
        return not (self.skills or self.experience_mentions or self.titles)
