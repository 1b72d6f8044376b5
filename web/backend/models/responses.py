#!/usr/bin/env python3
"""
Response models for API endpoints.

Serialized with camelCase aliases (``matchScore``, ``totalMatches``...).
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from core.matcher.models import MatchExplanation
from core.scorer.models import MatchResult, RankedResponse

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillMatchDetail(BaseModel):
    """How one candidate skill matched the job."""
    model_config = _CAMEL

    resume_skill: str
    job_skill: Optional[str] = None
    match_type: str
    score: int


class JobMatch(BaseModel):
    """A ranked job with its match metrics."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow',
        json_schema_extra={
            "example": {
                "_id": "65f1c2",
                "jobTitle": "Frontend Developer",
                "companyName": "TechCorp",
                "skills": ["JavaScript", "React"],
                "experienceLevel": "Mid Level",
                "jobLocation": "Remote",
                "postingDate": "2026-02-01T12:00:00",
                "matchScore": 20,
                "matchPercentage": 67,
                "skillCoverage": 100,
                "matchedSkills": ["js", "react"],
                "totalSkillsMatched": 2,
                "totalSkillsRequired": 2,
                "skillMatchDetails": [
                    {"resumeSkill": "js", "jobSkill": "js", "matchType": "exact", "score": 10}
                ]
            }
        }
    )

    id: str = Field(alias="_id")
    job_title: str
    company_name: str
    skills: List[str]
    experience_level: Optional[str] = None
    job_location: Optional[str] = None
    posting_date: Optional[datetime] = None

    match_score: int = Field(ge=0)
    match_percentage: int = Field(ge=0, le=100)
    skill_coverage: int = Field(ge=0, le=100)
    matched_skills: List[str]
    total_skills_matched: int = Field(ge=0)
    total_skills_required: int = Field(ge=0)
    skill_match_details: List[SkillMatchDetail]

    @classmethod
    def from_result(cls, result: MatchResult) -> 'JobMatch':
        job = result.job
        reserved = set(cls.model_fields) | {f.alias for f in cls.model_fields.values() if f.alias}
        return cls(
            **{k: v for k, v in job.extra.items() if k not in reserved},
            id=job.id,
            job_title=job.title,
            company_name=job.company,
            skills=list(job.skills),
            experience_level=job.experience_level,
            job_location=job.location,
            posting_date=job.posted_at,
            match_score=result.match_score,
            match_percentage=result.match_percentage,
            skill_coverage=result.skill_coverage,
            matched_skills=list(result.matched_skills),
            total_skills_matched=result.total_skills_matched,
            total_skills_required=result.total_skills_required,
            skill_match_details=[
                SkillMatchDetail(
                    resume_skill=d.resume_skill,
                    job_skill=d.job_skill,
                    match_type=d.match_type,
                    score=d.score
                )
                for d in result.skill_match_details
            ]
        )


class MatchSummary(BaseModel):
    """Counts per quality tier."""
    model_config = _CAMEL

    excellent: int = Field(ge=0, description="Matches with percentage >= 70")
    good: int = Field(ge=0, description="Matches with percentage 50-69")
    fair: int = Field(ge=0, description="Matches with percentage < 50")
    average_match: int = Field(ge=0, le=100)


class MatchDebug(BaseModel):
    """Diagnostics echoing the request."""
    model_config = _CAMEL

    input_skills: List[str]
    expanded_skills: List[str]
    total_jobs_searched: int


class MatchJobsResponse(BaseModel):
    """Response containing the ranked job shortlist."""
    model_config = _CAMEL

    total_matches: int
    jobs: List[JobMatch]
    summary: MatchSummary
    debug: MatchDebug
    message: Optional[str] = None

    @classmethod
    def from_ranked(cls, ranked: RankedResponse) -> 'MatchJobsResponse':
        return cls(
            total_matches=ranked.total_matches,
            jobs=[JobMatch.from_result(r) for r in ranked.jobs],
            summary=MatchSummary(
                excellent=ranked.summary.excellent,
                good=ranked.summary.good,
                fair=ranked.summary.fair,
                average_match=ranked.summary.average_match
            ),
            debug=MatchDebug(
                input_skills=ranked.input_skills,
                expanded_skills=ranked.expanded_skills,
                total_jobs_searched=ranked.total_jobs_searched
            ),
            message=ranked.message
        )


class MatchExplanationResponse(BaseModel):
    """Response containing matched and missing skills for one job."""
    model_config = _CAMEL

    job_title: str
    company_name: str
    matched_skills: List[str]
    missing_skills: List[str]
    match_percentage: int = Field(ge=0, le=100)
    recommendations: str

    @classmethod
    def from_explanation(cls, explanation: MatchExplanation) -> 'MatchExplanationResponse':
        return cls(
            job_title=explanation.job_title,
            company_name=explanation.company_name,
            matched_skills=explanation.matched_skills,
            missing_skills=explanation.missing_skills,
            match_percentage=explanation.match_percentage,
            recommendations=explanation.recommendations
        )
