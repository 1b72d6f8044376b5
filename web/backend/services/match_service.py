#!/usr/bin/env python3
"""
Match service - adapts HTTP request models to the scoring engine.
"""

import logging

from core.scorer import MatchRequest, ScoringService
from ..models.requests import MatchJobsRequest, MatchExplanationRequest
from ..models.responses import MatchJobsResponse, MatchExplanationResponse

logger = logging.getLogger(__name__)


class MatchService:
    """Service for ranking and explaining job matches over HTTP."""

    def __init__(self, scoring_service: ScoringService):
        self.scoring_service = scoring_service

    def match_jobs(self, body: MatchJobsRequest) -> MatchJobsResponse:
        """
        Rank the catalog against the request's skills.

        Raises:
            SkillValidationError: If skills are missing, empty or not strings.
        """
        request = MatchRequest(
            skills=body.skills,
            experience_level=body.experience_level,
            location=body.location,
            min_match_percentage=body.min_match_percentage
        )
        ranked = self.scoring_service.match_jobs(request)
        return MatchJobsResponse.from_ranked(ranked)

    def explain(self, body: MatchExplanationRequest) -> MatchExplanationResponse:
        """
        Explain the match for one job.

        Raises:
            SkillValidationError: If job id or skills are missing.
            JobNotFoundError: If the job id is unknown.
        """
        explanation = self.scoring_service.explain(body.job_id, body.skills)
        logger.debug(f"Explained job {body.job_id}: {explanation.match_percentage}%")
        return MatchExplanationResponse.from_explanation(explanation)
