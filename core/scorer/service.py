#!/usr/bin/env python3
"""
Scoring Service - ranks a job catalog against a candidate's skills.

One ranking request runs:
    validate skills -> normalize + expand -> score every job -> rank -> tier summary

Scoring is pure computation over an immutable snapshot, so large catalogs are
spread across a thread pool. ``executor.map`` returns results in input order,
which keeps rankings deterministic. Scoring is CPU-bound Python, so under the
GIL the pool bounds latency with its deadline and overlaps work with other
request threads; it does not give a multi-core speedup.
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import List, Optional, Sequence
import logging
import time

from core.config_loader import ScorerConfig
from core.exceptions import JobNotFoundError, MatchingTimeoutError, SkillValidationError
from core.job_catalog import JobCatalog
from core.matcher.explainability import explain_match
from core.matcher.models import JobRecord, MatchExplanation
from core.matcher.normalizer import normalize_text
from core.matcher.similarity import SimilarityCalculator
from core.matcher.synonyms import SKILL_SYNONYMS, SynonymTable, expand_skills
from core.scorer import ranking
from core.scorer.job_scorer import attribute_origins, score_job
from core.scorer.models import MatchRequest, MatchResult, RankedResponse

logger = logging.getLogger(__name__)

NO_JOBS_MESSAGE = "No jobs available at the moment"


def validate_skills(skills) -> List[str]:
    """
    Check that skills is a non-empty sequence of non-blank strings.

    Raises:
        SkillValidationError: If skills is missing, empty, not a list/tuple,
            or holds non-string entries or entries that normalize to nothing
    """
    if skills is None or not isinstance(skills, (list, tuple)):
        raise SkillValidationError("Skills array is required and cannot be empty")
    if len(skills) == 0:
        raise SkillValidationError("Skills array is required and cannot be empty")
    bad = [s for s in skills if not isinstance(s, str)]
    if bad:
        raise SkillValidationError(f"Skills must be strings, got {type(bad[0]).__name__}")
    blank = [s for s in skills if not normalize_text(s)]
    if blank:
        raise SkillValidationError(f"Skills must contain letters or digits, got {blank[0]!r}")
    return list(skills)


class ScoringService:
    """
    Service for ranking jobs and explaining single matches.

    The synonym table is shared read-only state; every request builds its own
    results and never mutates the table or the catalog.
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        catalog: Optional[JobCatalog] = None,
        table: SynonymTable = SKILL_SYNONYMS
    ):
        self.config = config or ScorerConfig()
        self.catalog = catalog
        self.table = table
        self.similarity_calc = SimilarityCalculator(table)

    def score_jobs(
        self,
        expanded_skills: Sequence[str],
        jobs: Sequence[JobRecord],
        candidate_skills: Optional[Sequence[str]] = None,
        experience_level: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[MatchResult]:
        """
        Score every job, in input order.

        Catalogs of at least ``parallel_threshold`` jobs are scored on a
        thread pool; smaller ones sequentially with a cooperative deadline
        check between jobs when ``deadline_seconds`` is set.
        """
        origins = attribute_origins(
            expanded_skills,
            candidate_skills if candidate_skills is not None else expanded_skills,
            self.similarity_calc
        )

        def _score(job: JobRecord) -> MatchResult:
            return score_job(
                expanded_skills,
                job,
                experience_level=experience_level,
                location=location,
                config=self.config,
                similarity_calc=self.similarity_calc,
                origins=origins
            )

        if len(jobs) >= self.config.parallel_threshold:
            logger.info(f"Scoring {len(jobs)} jobs on a thread pool")
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = executor.map(_score, jobs, timeout=self.config.deadline_seconds)
                try:
                    return list(results)
                except FuturesTimeoutError as e:
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise MatchingTimeoutError(
                        f"Scoring {len(jobs)} jobs exceeded {self.config.deadline_seconds}s"
                    ) from e

        deadline = None
        if self.config.deadline_seconds is not None:
            deadline = time.monotonic() + self.config.deadline_seconds

        scored = []
        for job in jobs:
            if deadline is not None and time.monotonic() > deadline:
                raise MatchingTimeoutError(
                    f"Scoring stopped after {len(scored)}/{len(jobs)} jobs: "
                    f"exceeded {self.config.deadline_seconds}s"
                )
            scored.append(_score(job))
        return scored

    def match_jobs(
        self,
        request: MatchRequest,
        jobs: Optional[Sequence[JobRecord]] = None
    ) -> RankedResponse:
        """
        Rank jobs against the candidate's skills.

        Args:
            request: Candidate skills and optional filters
            jobs: Job snapshot to rank; defaults to the catalog's jobs

        Returns:
            RankedResponse with at most ``result_limit`` jobs, tier counts and
            diagnostics. An empty catalog yields an empty response with a message.

        Raises:
            SkillValidationError: If the request's skills are invalid
        """
        input_skills = validate_skills(request.skills)
        expanded = list(expand_skills(input_skills, self.table))

        logger.info(f"Input skills: {input_skills}")
        logger.info(f"Expanded skills: {expanded}")

        if jobs is None:
            jobs = self.catalog.all_jobs() if self.catalog is not None else ()

        if not jobs:
            return RankedResponse(
                input_skills=input_skills,
                expanded_skills=expanded,
                total_jobs_searched=0,
                message=NO_JOBS_MESSAGE
            )

        scored = self.score_jobs(
            expanded,
            jobs,
            candidate_skills=input_skills,
            experience_level=request.experience_level,
            location=request.location
        )

        min_match = request.min_match_percentage
        if min_match is None:
            min_match = self.config.min_match_percentage

        ranked = ranking.rank_results(scored, min_match, self.config.result_limit)
        summary = ranking.summarize_tiers(ranked, self.config)

        logger.info(f"Matched {len(ranked)} of {len(jobs)} jobs "
                    f"(excellent={summary.excellent}, good={summary.good}, fair={summary.fair})")

        return RankedResponse(
            jobs=ranked,
            summary=summary,
            input_skills=input_skills,
            expanded_skills=expanded,
            total_jobs_searched=len(jobs)
        )

    def explain(self, job_id: Optional[str], skills) -> MatchExplanation:
        """
        Explain the match between the candidate's skills and one catalog job.

        Raises:
            SkillValidationError: If job_id or skills are missing
            JobNotFoundError: If the catalog has no job with this id
        """
        if not job_id:
            raise SkillValidationError("Job ID and skills are required")
        try:
            candidate_skills = validate_skills(skills)
        except SkillValidationError as e:
            raise SkillValidationError(f"Job ID and skills are required: {e}") from e

        job = self.catalog.get(job_id) if self.catalog is not None else None
        if job is None:
            raise JobNotFoundError(f"Job not found: {job_id}")

        return explain_match(
            job,
            candidate_skills,
            threshold=self.config.explanation_threshold,
            max_recommendations=self.config.max_recommendations,
            similarity_calc=self.similarity_calc
        )
