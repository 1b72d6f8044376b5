#!/usr/bin/env python3
"""
Match endpoints - rank jobs and explain single matches.
"""

import logging
from fastapi import APIRouter, Depends

from core.scorer import ScoringService
from ..dependencies import get_scoring_service
from ..services.match_service import MatchService
from ..models.requests import MatchJobsRequest, MatchExplanationRequest
from ..models.responses import MatchJobsResponse, MatchExplanationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["matches"])


@router.post(
    "/match-jobs",
    response_model=MatchJobsResponse,
    response_model_exclude_none=True
)
def match_jobs(
    body: MatchJobsRequest,
    scoring_service: ScoringService = Depends(get_scoring_service)
):
    """
    Rank all jobs against the candidate's skills.

    Returns at most 20 jobs ordered by match score, then skill coverage,
    then posting date, with a summary of quality tiers.
    """
    return MatchService(scoring_service).match_jobs(body)


@router.post("/match-explanation", response_model=MatchExplanationResponse)
def match_explanation(
    body: MatchExplanationRequest,
    scoring_service: ScoringService = Depends(get_scoring_service)
):
    """
    Explain which of a job's skills the candidate has and which are missing.
    """
    return MatchService(scoring_service).explain(body)
