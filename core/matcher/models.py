#!/usr/bin/env python3
"""
Matcher Models - Data structures for matching.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple
from datetime import datetime

from dateutil import parser as date_parser

from core.exceptions import CatalogError

# Accepted source keys per field, camelCase names as stored by the job board first
_FIELD_ALIASES = {
    'id': ('_id', 'id', 'job_id', 'jobId'),
    'title': ('jobTitle', 'title', 'job_title'),
    'company': ('companyName', 'company', 'company_name'),
    'skills': ('skills', 'required_skills', 'requiredSkills'),
    'experience_level': ('experienceLevel', 'experience_level'),
    'location': ('jobLocation', 'location', 'job_location'),
    'posted_at': ('postingDate', 'posted_at', 'posting_date', 'createdAt'),
}


def _pick(data: Dict[str, Any], name: str) -> Any:
    for key in _FIELD_ALIASES[name]:
        if data.get(key) is not None:
            return data[key]
    return None


def parse_posting_date(value: Any) -> Optional[datetime]:
    """Parse a posting date given as datetime, ISO-8601 string or epoch milliseconds."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000.0)
    try:
        return date_parser.isoparse(str(value))
    except ValueError:
        return date_parser.parse(str(value))


@dataclass(frozen=True)
class JobRecord:
    """Read-only job posting as supplied by the job catalog."""
    id: str
    title: str = ""
    company: str = ""
    skills: Tuple[str, ...] = ()
    experience_level: Optional[str] = None
    location: Optional[str] = None
    posted_at: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobRecord':
        """
        Build a JobRecord from an external mapping.

        Accepts both the job board's field names (``jobTitle``, ``companyName``,
        ``jobLocation``, ``postingDate``...) and snake_case names. Unknown keys
        are kept in ``extra`` so they can be echoed back to callers.

        Raises:
            CatalogError: If the entry is not an object, has no id, has a
                malformed skills field or an unreadable posting date
        """
        if not isinstance(data, dict):
            raise CatalogError(f"Job entry must be an object, got {type(data).__name__}")

        job_id = _pick(data, 'id')
        if job_id is None:
            raise CatalogError(f"Job entry has no identifier: {str(data)[:80]}")

        skills = _pick(data, 'skills') or []
        if isinstance(skills, str):
            skills = [skills]
        if not isinstance(skills, (list, tuple)):
            raise CatalogError(f"Job {job_id} skills must be a list, got {type(skills).__name__}")
        bad = [s for s in skills if not isinstance(s, str)]
        if bad:
            raise CatalogError(f"Job {job_id} skills must be strings, got {type(bad[0]).__name__}")

        try:
            posted_at = parse_posting_date(_pick(data, 'posted_at'))
        except (ValueError, OverflowError) as e:
            raise CatalogError(f"Job {job_id} has an unreadable posting date: {e}") from e

        known = {key for aliases in _FIELD_ALIASES.values() for key in aliases}
        return cls(
            id=str(job_id),
            title=_pick(data, 'title') or "",
            company=_pick(data, 'company') or "",
            skills=tuple(skills),
            experience_level=_pick(data, 'experience_level'),
            location=_pick(data, 'location'),
            posted_at=posted_at,
            extra={k: v for k, v in data.items() if k not in known},
        )


@dataclass(frozen=True)
class SkillMatchTrace:
    """How one candidate skill matched its best job skill."""
    resume_skill: str
    job_skill: Optional[str]
    match_type: str  # 'exact', 'strong', 'partial', 'weak'
    score: int


@dataclass(frozen=True)
class MatchExplanation:
    """Matched and missing skills for one job, with a short recommendation."""
    job_title: str
    company_name: str
    matched_skills: List[str]
    missing_skills: List[str]
    match_percentage: int
    recommendations: str
