"""
Job fixtures shared by engine and web tests.
"""

from core.matcher.models import JobRecord


def make_job(job_id, skills, posted_at=None, **kwargs):
    """Build a JobRecord with sensible defaults for tests."""
    return JobRecord(
        id=job_id,
        title=kwargs.pop('title', f"Job {job_id}"),
        company=kwargs.pop('company', "TestCo"),
        skills=tuple(skills),
        posted_at=posted_at,
        **kwargs
    )


SAMPLE_JOBS = [
    {
        "_id": "frontend",
        "jobTitle": "Frontend Developer",
        "companyName": "Brightline",
        "skills": ["JavaScript", "React", "CSS"],
        "experienceLevel": "Mid Level",
        "jobLocation": "Remote",
        "postingDate": "2026-09-28T10:00:00Z",
        "postedBy": "recruiter@brightline.example",
    },
    {
        "_id": "backend",
        "jobTitle": "Backend Engineer",
        "companyName": "Harbor Data",
        "skills": ["Python", "Django", "PostgreSQL"],
        "experienceLevel": "Senior Level",
        "jobLocation": "Berlin",
        "postingDate": "2026-10-02T08:30:00Z",
    },
    {
        "_id": "empty",
        "jobTitle": "Generalist",
        "companyName": "Nowhere Inc",
        "skills": [],
        "postingDate": "2026-10-03T08:30:00Z",
    },
]
