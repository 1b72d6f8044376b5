#!/usr/bin/env python3
"""
Job Catalog - read-only source of job postings for the matching engine.

The engine never fetches or persists jobs itself. A catalog hands it an
immutable snapshot before scoring begins and resolves single jobs by id for
explanations.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple, Union, runtime_checkable

from core.exceptions import CatalogError
from core.matcher.models import JobRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class JobCatalog(Protocol):
    def get(self, job_id: str) -> Optional[JobRecord]:
        ...

    def all_jobs(self) -> Tuple[JobRecord, ...]:
        ...


class InMemoryJobCatalog:
    """Catalog over a fixed, in-memory snapshot of jobs."""

    def __init__(self, jobs: Iterable[Union[JobRecord, Dict[str, Any]]] = ()):
        records = tuple(
            job if isinstance(job, JobRecord) else JobRecord.from_dict(job)
            for job in jobs
        )
        self._jobs = records
        self._by_id = {job.id: job for job in records}

    def get(self, job_id: str) -> Optional[JobRecord]:
        return self._by_id.get(str(job_id))

    def all_jobs(self) -> Tuple[JobRecord, ...]:
        return self._jobs

    def __len__(self) -> int:
        return len(self._jobs)


def load_catalog(path: Union[str, Path]) -> InMemoryJobCatalog:
    """
    Load a catalog from a JSON file.

    The file holds either an array of job objects or ``{"jobs": [...]}``.

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogError: If the JSON is invalid or an entry cannot be read
    """
    path = Path(path)
    logger.info(f"Loading job catalog from {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in job catalog {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get('jobs')
    if not isinstance(data, list):
        raise CatalogError(f"Job catalog {path} must contain a list of jobs")

    catalog = InMemoryJobCatalog(data)
    logger.info(f"Loaded {len(catalog)} jobs")
    return catalog
