#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import logging
from functools import lru_cache

from core.job_catalog import InMemoryJobCatalog, JobCatalog, load_catalog
from core.scorer import ScoringService
from .config import get_config, get_project_root

logger = logging.getLogger(__name__)


@lru_cache()
def get_catalog() -> JobCatalog:
    """
    Load the job catalog once per process.

    Uses ``catalog.jobs_file`` (relative paths resolve against the project
    root); without one the catalog is empty.
    """
    jobs_file = get_config().catalog.jobs_file
    if not jobs_file:
        logger.warning("No catalog.jobs_file configured, serving an empty job catalog")
        return InMemoryJobCatalog()

    path = get_project_root() / jobs_file
    return load_catalog(path)


def get_scoring_service() -> ScoringService:
    """
    FastAPI dependency that provides a ScoringService.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: ScoringService = Depends(get_scoring_service)):
            ...
    """
    return ScoringService(config=get_config().scorer, catalog=get_catalog())
