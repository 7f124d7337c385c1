"""Service exports."""

from .filter_service import filter_active_jobs, to_job_postings
from .storage import HttpResumeStorage, LocalResumeStorage, ResumeStorage, get_resume_storage

__all__ = [
    "filter_active_jobs",
    "to_job_postings",
    "ResumeStorage",
    "LocalResumeStorage",
    "HttpResumeStorage",
    "get_resume_storage",
]
