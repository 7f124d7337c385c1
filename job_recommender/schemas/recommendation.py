"""Recommendation output records returned to the web layer."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Recommendation(BaseModel):
    """One ranked job with its match score and a human-readable reason."""

    job_id: str = Field(..., description="Id of the recommended job")
    job_title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company name")
    location: str = Field(default="", description="Job location")
    type: str = Field(default="", description="Employment type")
    skills: List[str] = Field(default_factory=list, description="Skills listed by the job")
    match_score: float = Field(..., gt=0, le=100, description="0-100 fit estimate used for ranking")
    reason: str = Field(default="", description="Why this job was recommended")


class RecommendationResult(BaseModel):
    """Recommendations plus an optional advisory message (e.g. 'complete your profile')."""

    recommendations: List[Recommendation] = Field(default_factory=list)
    message: Optional[str] = Field(default=None, description="Advisory text when the list is empty")

    @property
    def count(self) -> int:
        return len(self.recommendations)
