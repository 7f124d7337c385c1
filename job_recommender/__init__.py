"""
Job Recommender - ranks open job postings against a candidate's profile and resume.

1. Extracts normalized text from the stored resume (PDF, DOCX, TXT)
2. Pulls skills, experience mentions and title keywords out of the text
3. Scores active jobs by skill coverage plus title/experience bonuses
4. Returns the top matches with human-readable reasons
"""

from job_recommender.config import LOG_LEVEL
from job_recommender.utils.logger import configure_package_logging

configure_package_logging(LOG_LEVEL)

from job_recommender.cv_pipeline.text_extractor import extract_resume_text  # noqa: E402
from job_recommender.ranking.recommender import compute_recommendations  # noqa: E402
from job_recommender.services.recommendation_service import recommend_for_profile  # noqa: E402

__version__ = "1.0.0"

__all__ = ["extract_resume_text", "compute_recommendations", "recommend_for_profile"]
