"""Filter the job catalog before scoring. Does not mutate inputs."""

from typing import Iterable, List, Union

from job_recommender.schemas.job_posting import JobPosting

JobLike = Union[JobPosting, dict]


def to_job_postings(jobs: Iterable[JobLike]) -> List[JobPosting]:
    """Accept JobPosting instances or raw store documents (e.g. Mongo dicts with _id)."""
    return [j if isinstance(j, JobPosting) else JobPosting.model_validate(j) for j in (jobs or [])]


def filter_active_jobs(jobs: Iterable[JobLike]) -> List[JobPosting]:
    """
    Keep only active jobs, in catalog order.
    The catalog store may pass the unfiltered set; closed jobs are never recommended.
    """
    return [j for j in to_job_postings(jobs) if j.is_active]
