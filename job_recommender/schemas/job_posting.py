"""Job posting schema as supplied by the job catalog store."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class JobStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class JobPosting(BaseModel):
    """Job listing fields relevant to recommendation scoring. Read-only for the recommender."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id", description="Job id (Mongo-style _id accepted)")
    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company or employer name")
    location: str = Field(default="", description="Job location")
    type: JobType = Field(default=JobType.FULL_TIME, description="Employment type")
    skills: List[str] = Field(default_factory=list, description="Skills required by the job")
    status: JobStatus = Field(default=JobStatus.ACTIVE, description="Only active jobs are recommended")
    description: Optional[str] = Field(default=None, description="Full job description")
    requirements: List[str] = Field(default_factory=list, description="Free-form requirement lines")
    experience: Optional[str] = Field(default=None, description="Experience level text, e.g. '3+ years'")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        # ObjectId and ints arrive from the store; keep ids as strings
        return v if isinstance(v, str) else str(v)

    @field_validator("skills", "requirements", mode="before")
    @classmethod
    def _drop_blank(cls, v):
        if v is None:
            return []
        return [s for s in v if isinstance(s, str) and s.strip()]

    @property
    def is_active(self) -> bool:
        return self.status == JobStatus.ACTIVE
