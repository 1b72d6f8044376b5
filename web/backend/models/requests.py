#!/usr/bin/env python3
"""
Request models for API endpoints.

Field names follow the job board's camelCase wire format; snake_case names
are accepted too.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional


class MatchJobsRequest(BaseModel):
    """Request to rank all jobs against a candidate's skills."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "skills": ["Python", "React", "AWS"],
                "experienceLevel": "Mid Level",
                "location": "Remote",
                "minMatchPercentage": 15
            }
        }
    )

    # Shape and emptiness are checked by the engine so errors match its messages
    skills: Optional[List[Any]] = Field(None, description="Candidate skills, non-empty")
    experience_level: Optional[str] = Field(None, description="Candidate experience level")
    location: Optional[str] = Field(None, description="Preferred job location")
    min_match_percentage: Optional[int] = Field(
        None,
        ge=0,
        le=100,
        description="Minimum match percentage (0-100), defaults to the configured value"
    )


class MatchExplanationRequest(BaseModel):
    """Request to explain the match for one job."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: Optional[str] = Field(None, description="Identifier of the job to explain")
    skills: Optional[List[Any]] = Field(None, description="Candidate skills, non-empty")
