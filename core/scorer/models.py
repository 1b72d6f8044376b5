#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from core.matcher.models import JobRecord, SkillMatchTrace


@dataclass(frozen=True)
class MatchRequest:
    """Candidate input for one ranking request."""
    skills: Sequence[str]
    experience_level: Optional[str] = None
    location: Optional[str] = None
    min_match_percentage: Optional[int] = None  # None = configured default


@dataclass(frozen=True)
class MatchResult:
    """Scored match of the candidate's skills against one job."""
    job: JobRecord

    match_score: int = 0
    match_percentage: int = 0
    skill_coverage: int = 0

    matched_skills: Tuple[str, ...] = ()
    skill_match_details: Tuple[SkillMatchTrace, ...] = ()

    @property
    def total_skills_matched(self) -> int:
        return len(self.matched_skills)

    @property
    def total_skills_required(self) -> int:
        return len(self.job.skills)


@dataclass(frozen=True)
class TierSummary:
    """Counts per quality tier and the mean match percentage of a ranked list."""
    excellent: int = 0
    good: int = 0
    fair: int = 0
    average_match: int = 0


@dataclass(frozen=True)
class RankedResponse:
    """Ranked shortlist plus diagnostics echoing the request."""
    jobs: List[MatchResult] = field(default_factory=list)
    summary: TierSummary = field(default_factory=TierSummary)
    input_skills: List[str] = field(default_factory=list)
    expanded_skills: List[str] = field(default_factory=list)
    total_jobs_searched: int = 0
    message: Optional[str] = None

    @property
    def total_matches(self) -> int:
        return len(self.jobs)
