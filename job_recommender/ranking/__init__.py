"""Ranking: skill coverage scoring and recommendation lists."""

from .recommender import (
    JobScore,
    build_reason,
    combined_skill_set,
    compute_recommendations,
    has_profile_signal,
    score_job,
)

__all__ = [
    "JobScore",
    "build_reason",
    "combined_skill_set",
    "compute_recommendations",
    "has_profile_signal",
    "score_job",
]
