"""Schema exports."""

from .candidate_profile import CandidateProfile, ExperienceEntry, ProfileSkill, SkillLevel
from .job_posting import JobPosting, JobStatus, JobType
from .recommendation import Recommendation, RecommendationResult
from .resume_document import ResumeDocument, ResumeFormat, detect_format
from .resume_features import ResumeFeatures

__all__ = [
    "CandidateProfile",
    "ExperienceEntry",
    "ProfileSkill",
    "SkillLevel",
    "JobPosting",
    "JobStatus",
    "JobType",
    "Recommendation",
    "RecommendationResult",
    "ResumeDocument",
    "ResumeFormat",
    "detect_format",
    "ResumeFeatures",
]
