"""Recommendation flow for one candidate: resume -> text -> features -> ranked jobs."""

from typing import Iterable, Optional

from job_recommender.cv_pipeline.feature_extractor import extract_resume_features
from job_recommender.cv_pipeline.text_extractor import extract_resume_text, extract_resume_text_async
from job_recommender.ranking.recommender import compute_recommendations
from job_recommender.schemas.candidate_profile import CandidateProfile
from job_recommender.schemas.recommendation import RecommendationResult
from job_recommender.schemas.resume_features import ResumeFeatures
from job_recommender.services.filter_service import JobLike
from job_recommender.services.storage import ResumeStorage
from job_recommender.utils.logger import get_logger

logger = get_logger(__name__)


def _features_from_text(text: str) -> ResumeFeatures:
    try:
        return extract_resume_features(text)
    except Exception as e:
        logger.exception("Resume feature extraction failed: %s", e)
        return ResumeFeatures()


def _as_profile(profile) -> CandidateProfile:
    return profile if isinstance(profile, CandidateProfile) else CandidateProfile.model_validate(profile)


def recommend_for_profile(
    profile,
    jobs: Iterable[JobLike],
    storage: Optional[ResumeStorage] = None,
    limit: Optional[int] = None,
) -> RecommendationResult:
    """
    Full recommendation for a stored profile (CandidateProfile or profile document).
    A missing or broken resume only reduces signal; declared skills still count.
    """
    candidate = _as_profile(profile)
    text = extract_resume_text(candidate.resume, storage=storage) if candidate.has_resume else ""
    features = _features_from_text(text)
    if candidate.has_resume and not text:
        logger.info("No text extracted from resume %s; using declared profile only", candidate.resume)
    return compute_recommendations(candidate, jobs, features=features, limit=limit)


async def recommend_for_profile_async(
    profile,
    jobs: Iterable[JobLike],
    storage: Optional[ResumeStorage] = None,
    limit: Optional[int] = None,
) -> RecommendationResult:
    """Same as recommend_for_profile, for callers running inside an event loop."""
    candidate = _as_profile(profile)
    text = await extract_resume_text_async(candidate.resume, storage=storage) if candidate.has_resume else ""
    features = _features_from_text(text)
    if candidate.has_resume and not text:
        logger.info("No text extracted from resume %s; using declared profile only", candidate.resume)
    return compute_recommendations(candidate, jobs, features=features, limit=limit)
