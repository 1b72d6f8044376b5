#!/usr/bin/env python3
"""
Explainability Module - which of a job's skills the candidate already has.

For every normalized job skill, the skill counts as matched when any
normalized candidate skill (searched in the candidate's order) reaches the
explanation threshold; otherwise it is reported as missing, and the first few
missing skills become the recommendation.
"""

from typing import List, Optional, Sequence
import logging

from core.matcher.models import JobRecord, MatchExplanation
from core.matcher.normalizer import normalize_text, round_half_up
from core.matcher.similarity import SimilarityCalculator

logger = logging.getLogger(__name__)

ALL_SKILLS_MESSAGE = "You have all the required skills!"


def build_recommendation(missing_skills: Sequence[str], limit: int = 3) -> str:
    """Suggest up to ``limit`` missing skills, or affirm a full match."""
    if not missing_skills:
        return ALL_SKILLS_MESSAGE
    return f"Consider learning: {', '.join(missing_skills[:limit])}"


def explain_match(
    job: JobRecord,
    candidate_skills: Sequence[str],
    threshold: float = 0.7,
    max_recommendations: int = 3,
    similarity_calc: Optional[SimilarityCalculator] = None
) -> MatchExplanation:
    """
    Generate an explanation of how the candidate's skills cover one job.

    Args:
        job: Job to explain
        candidate_skills: Candidate skills as entered
        threshold: Minimum similarity for a job skill to count as matched
        max_recommendations: How many missing skills the recommendation names
        similarity_calc: Similarity calculator

    Returns:
        MatchExplanation; a job without required skills reports 0%
    """
    similarity_calc = similarity_calc or SimilarityCalculator()

    resume_skills = [normalize_text(s) for s in candidate_skills]
    job_skills = [normalize_text(s) for s in job.skills]

    matched: List[str] = []
    missing: List[str] = []
    for job_skill in job_skills:
        if any(similarity_calc.calculate(resume_skill, job_skill) >= threshold
               for resume_skill in resume_skills):
            matched.append(job_skill)
        else:
            missing.append(job_skill)

    match_percentage = 0
    if job_skills:
        match_percentage = round_half_up(len(matched) / len(job_skills) * 100)
    else:
        logger.info(f"Job {job.id} lists no required skills, reporting 0% match")

    return MatchExplanation(
        job_title=job.title,
        company_name=job.company,
        matched_skills=matched,
        missing_skills=missing,
        match_percentage=match_percentage,
        recommendations=build_recommendation(missing, max_recommendations)
    )
