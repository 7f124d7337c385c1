"""Job recommendations: skill coverage scoring with title/experience bonuses and match reasons."""

import re
from typing import Iterable, List, NamedTuple, Optional, Set

from job_recommender.config import (
    EXPERIENCE_BONUS,
    REASON_MAX_SKILLS,
    RECOMMENDATION_LIMIT,
    TITLE_BONUS,
)
from job_recommender.schemas.candidate_profile import CandidateProfile
from job_recommender.schemas.job_posting import JobPosting
from job_recommender.schemas.recommendation import Recommendation, RecommendationResult
from job_recommender.schemas.resume_features import ResumeFeatures
from job_recommender.services.filter_service import JobLike, filter_active_jobs
from job_recommender.utils.helpers import normalize_skill, normalize_skills
from job_recommender.utils.logger import get_logger

logger = get_logger(__name__)

MAX_SCORE = 100.0

NO_PROFILE_SIGNAL_MESSAGE = "Add skills or upload a resume to get personalized recommendations."
NO_ACTIVE_JOBS_MESSAGE = "No active jobs available at the moment."
GENERIC_REASON = "Relevant to your profile"


class JobScore(NamedTuple):
    """Per-job scoring breakdown."""

    score: float
    base_score: float
    matched_skills: List[str]  # job's own spelling, job order
    title_keyword: Optional[str]
    experience_bonus: bool


def combined_skill_set(profile: CandidateProfile, features: Optional[ResumeFeatures] = None) -> Set[str]:
    """Union of declared and resume-derived skills, case-normalized."""
    skills = set(profile.skill_names)
    if features is not None:
        skills.update(normalize_skills(features.skills))
    return skills


def has_profile_signal(
    profile: CandidateProfile,
    features: Optional[ResumeFeatures] = None,
    resume_on_file: Optional[bool] = None,
) -> bool:
    """False only when there are no declared skills, no resume skills and no resume on file."""
    if profile.skill_names:
        return True
    if features is not None and features.skills:
        return True
    return profile.has_resume if resume_on_file is None else resume_on_file


def _matched_job_skills(job: JobPosting, combined: Set[str]) -> tuple[List[str], int]:
    """(matched skills in the job's spelling, number of distinct job skills)."""
    seen: Set[str] = set()
    matched: List[str] = []
    for skill in job.skills:
        key = normalize_skill(skill)
        if not key or key in seen:
            continue
        seen.add(key)
        if key in combined:
            matched.append(skill.strip())
    return matched, len(seen)


def _title_keyword(job: JobPosting, titles: Iterable[str]) -> Optional[str]:
    """First candidate title keyword (vocabulary order) found as a whole word in the job title."""
    job_title = (job.title or "").lower()
    if not job_title:
        return None
    for kw in titles:
        if kw and re.search(rf"(?<!\w){re.escape(kw.lower())}(?!\w)", job_title):
            return kw
    return None


def score_job(
    job: JobPosting,
    combined_skills: Set[str],
    features: Optional[ResumeFeatures] = None,
    title_bonus: float = TITLE_BONUS,
    experience_bonus: float = EXPERIENCE_BONUS,
) -> JobScore:
    """
    Score one job in [0, 100].

    base = matched / max(1, job skill count) * 100. A title keyword shared with the
    resume adds title_bonus. Experience mentions on the resume add experience_bonus,
    but only to a job that already scores through skills or title.
    """
    matched, total = _matched_job_skills(job, combined_skills)
    base = min(MAX_SCORE, max(0.0, len(matched) / max(1, total) * 100.0))

    kw = _title_keyword(job, features.titles) if features is not None else None
    score = base
    if kw is not None:
        score += max(0.0, title_bonus)
    exp_applied = bool(features is not None and features.experience_mentions and score > 0)
    if exp_applied:
        score += max(0.0, experience_bonus)

    return JobScore(
        score=min(MAX_SCORE, score),
        base_score=base,
        matched_skills=matched,
        title_keyword=kw,
        experience_bonus=exp_applied,
    )


def build_reason(job: JobPosting, job_score: JobScore, max_skills: int = REASON_MAX_SKILLS) -> str:
    """Short human-readable explanation, e.g. 'Matches your skills: React, Node.js. Full-time position'."""
    reasons = []
    if job_score.matched_skills:
        reasons.append("Matches your skills: " + ", ".join(job_score.matched_skills[:max(1, max_skills)]))
    else:
        reasons.append(GENERIC_REASON)
    if job_score.title_keyword:
        reasons.append(f"Title matches your experience as {job_score.title_keyword}")
    if job_score.experience_bonus:
        reasons.append("Experience listed on your resume")
    if job.type:
        job_type = job.type.value
        reasons.append(f"{job_type[:1].upper()}{job_type[1:]} position")
    return ". ".join(reasons)


def compute_recommendations(
    profile: CandidateProfile,
    jobs: Iterable[JobLike],
    features: Optional[ResumeFeatures] = None,
    limit: Optional[int] = None,
    resume_on_file: Optional[bool] = None,
) -> RecommendationResult:
    """
    Rank active jobs for one candidate and return the top `limit` with reasons.

    Jobs scoring 0 are dropped; ties keep catalog order. An empty profile or
    catalog is not an error: the result is empty with an advisory message.
    """
    if not has_profile_signal(profile, features, resume_on_file):
        return RecommendationResult(message=NO_PROFILE_SIGNAL_MESSAGE)

    active = filter_active_jobs(jobs)
    if not active:
        return RecommendationResult(message=NO_ACTIVE_JOBS_MESSAGE)

    top_n = limit if limit is not None and limit >= 1 else RECOMMENDATION_LIMIT
    combined = combined_skill_set(profile, features)

    scored = []
    for job in active:
        js = score_job(job, combined, features)
        rounded = round(js.score, 1)
        if rounded <= 0:
            continue
        scored.append((job, js, rounded))
    # sort is stable: equal scores keep catalog order
    scored.sort(key=lambda x: -x[2])

    recommendations = [
        Recommendation(
            job_id=job.id,
            job_title=job.title,
            company=job.company,
            location=job.location,
            type=job.type.value,
            skills=list(job.skills),
            match_score=rounded,
            reason=build_reason(job, js),
        )
        for job, js, rounded in scored[:top_n]
    ]
    logger.info(
        "Scored %s active jobs; %s with a match, returning %s",
        len(active),
        len(scored),
        len(recommendations),
    )
    return RecommendationResult(recommendations=recommendations)
