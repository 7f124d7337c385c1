"""Candidate profile as supplied by the profile store."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class ProfileSkill(BaseModel):
    """A declared skill. The profile store keeps {name, level}; bare strings are accepted too."""

    name: str = Field(default="", description="Skill name as typed by the candidate")
    level: Optional[SkillLevel] = Field(default=None, description="Self-assessed proficiency")


class ExperienceEntry(BaseModel):
    """A work history entry; only its presence and text matter here."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(default="", description="Job title held")
    company: str = Field(default="", description="Employer")
    description: str = Field(default="", description="What the candidate did")


class CandidateProfile(BaseModel):
    """Profile fields used to decide whether and how to compute recommendations."""

    model_config = ConfigDict(extra="ignore")

    skills: List[ProfileSkill] = Field(default_factory=list, description="Declared skills")
    resume: Optional[str] = Field(default=None, description="Storage path or URL of the uploaded resume")
    about: str = Field(default="", description="Free-text summary")
    experience: List[ExperienceEntry] = Field(default_factory=list, description="Work history")

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, v):
        if not v:
            return []
        out = []
        for item in v:
            if isinstance(item, str):
                out.append({"name": item})
            else:
                out.append(item)
        return out

    @field_validator("about", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

    @property
    def skill_names(self) -> List[str]:
        """Declared skill names, lower-cased and stripped, blanks dropped."""
        return [s.name.strip().lower() for s in self.skills if s.name and s.name.strip()]

    @property
    def has_resume(self) -> bool:
        return bool((self.resume or "").strip())
