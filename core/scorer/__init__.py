#!/usr/bin/env python3
"""
Scoring Module - composite scoring and ranking.

Public API:
- ScoringService: Ranks a job catalog and explains single matches
- MatchRequest / MatchResult / RankedResponse: Request and result data

Modules:

- models.py: Data structures (MatchRequest, MatchResult, TierSummary, RankedResponse)
- job_scorer.py: Composite score, percentage and coverage for one job
- ranking.py: Filtering, multi-key ordering, truncation and quality tiers
- service.py: ScoringService orchestrator
"""

from core.scorer.models import MatchRequest, MatchResult, TierSummary, RankedResponse
from core.scorer.service import ScoringService

__all__ = ['ScoringService', 'MatchRequest', 'MatchResult', 'TierSummary', 'RankedResponse']
