#!/usr/bin/env python3
"""
Job Scorer - composite score for one job against the candidate's skills.

Points per expanded candidate skill (best counterpart among the job's
expanded skills):

    similarity >= 1.0  -> 10 (exact)
    similarity >= 0.8  ->  8 (strong)
    similarity >= 0.6  ->  5 (partial)
    similarity >= 0.4  ->  2 (weak, not counted towards coverage)

Plus a flat bonus for a similar experience level and for a similar location.

    max_possible     = len(expanded candidate skills) * 10 + 10
    match_percentage = min(100, round(score / max_possible * 100))
    skill_coverage   = min(100, round(len(matched skills) / len(job skills) * 100))
"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging

from core.config_loader import ScorerConfig
from core.matcher.models import JobRecord, SkillMatchTrace
from core.matcher.normalizer import normalize_text, round_half_up
from core.matcher.similarity import SimilarityCalculator
from core.matcher.synonyms import expand_skills, expand_variants
from core.scorer.models import MatchResult

logger = logging.getLogger(__name__)

# Headroom reserved for the experience and location bonuses
BONUS_HEADROOM = 10


def _tier_for(similarity: float, config: ScorerConfig) -> Optional[Tuple[str, int, bool]]:
    """Map a similarity to (match_type, points, counts_for_coverage), or None below the weak tier."""
    t = config.thresholds
    if similarity >= t.exact:
        return 'exact', t.exact_points, True
    if similarity >= t.strong:
        return 'strong', t.strong_points, True
    if similarity >= t.partial:
        return 'partial', t.partial_points, True
    if similarity >= t.weak:
        return 'weak', t.weak_points, False
    return None


def attribute_origins(
    expanded_skills: Sequence[str],
    candidate_skills: Sequence[str],
    similarity_calc: SimilarityCalculator
) -> Dict[str, str]:
    """
    Map each expanded skill to the first original candidate skill it came from.

    An expanded skill is attributed to the first normalized candidate skill
    whose variant group contains it; unattributed skills map to themselves.
    """
    normalized = [normalize_text(s) for s in candidate_skills]
    groups = [(skill, expand_variants(skill, similarity_calc.table)) for skill in normalized]

    origins: Dict[str, str] = {}
    for expanded in expanded_skills:
        origins[expanded] = next(
            (skill for skill, variants in groups if expanded in variants),
            expanded
        )
    return origins


def score_job(
    expanded_candidate_skills: Sequence[str],
    job: JobRecord,
    experience_level: Optional[str] = None,
    location: Optional[str] = None,
    candidate_skills: Optional[Sequence[str]] = None,
    config: Optional[ScorerConfig] = None,
    similarity_calc: Optional[SimilarityCalculator] = None,
    origins: Optional[Dict[str, str]] = None
) -> MatchResult:
    """
    Score one job.

    Args:
        expanded_candidate_skills: Candidate skills after normalization and expansion
        job: Job to score
        experience_level: Optional candidate experience level
        location: Optional candidate location
        candidate_skills: Original candidate skills, used to attribute matches;
            defaults to the expanded skills themselves
        config: Scoring configuration
        similarity_calc: Similarity calculator (shares the synonym table)
        origins: Precomputed expanded-skill -> original-skill map (see attribute_origins)

    Returns:
        MatchResult; a job with no required skills yields a zero-valued result
    """
    config = config or ScorerConfig()
    similarity_calc = similarity_calc or SimilarityCalculator()

    if not job.skills:
        return MatchResult(job=job)

    if origins is None:
        origins = attribute_origins(
            expanded_candidate_skills,
            candidate_skills if candidate_skills is not None else expanded_candidate_skills,
            similarity_calc
        )

    expanded_job_skills = expand_skills(job.skills, similarity_calc.table)

    match_score = 0
    matched: Dict[str, None] = {}
    details: List[SkillMatchTrace] = []

    for resume_skill in expanded_candidate_skills:
        best_match = 0.0
        matched_job_skill = None
        for job_skill in expanded_job_skills:
            similarity = similarity_calc.calculate(resume_skill, job_skill)
            if similarity > best_match:
                best_match = similarity
                matched_job_skill = job_skill

        tier = _tier_for(best_match, config)
        if tier is None:
            continue

        match_type, points, counts = tier
        original = origins.get(resume_skill, resume_skill)
        match_score += points
        if counts:
            matched.setdefault(original, None)
        details.append(SkillMatchTrace(
            resume_skill=original,
            job_skill=matched_job_skill,
            match_type=match_type,
            score=points
        ))

    if experience_level and job.experience_level:
        if similarity_calc.calculate(experience_level, job.experience_level) >= config.bonus_similarity_threshold:
            match_score += config.experience_bonus

    if location and job.location:
        if similarity_calc.calculate(location, job.location) >= config.bonus_similarity_threshold:
            match_score += config.location_bonus

    max_possible_score = len(expanded_candidate_skills) * config.thresholds.exact_points + BONUS_HEADROOM
    match_percentage = min(100, round_half_up(match_score / max_possible_score * 100))
    # several candidate skills can land on the same job skill, so cap like the percentage
    skill_coverage = min(100, round_half_up(len(matched) / len(job.skills) * 100))

    logger.debug(f"Job {job.id}: score={match_score}, match={match_percentage}%, coverage={skill_coverage}%")

    return MatchResult(
        job=job,
        match_score=match_score,
        match_percentage=match_percentage,
        skill_coverage=skill_coverage,
        matched_skills=tuple(matched),
        skill_match_details=tuple(details)
    )
