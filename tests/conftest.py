"""
Pytest configuration and fixtures.
"""

import copy

import pytest

from core.config_loader import ScorerConfig
from core.job_catalog import InMemoryJobCatalog
from core.scorer import ScoringService
from tests.fixtures.job_fixtures import SAMPLE_JOBS


@pytest.fixture
def sample_job_dicts():
    """Job postings in the job board's field names."""
    return copy.deepcopy(SAMPLE_JOBS)


@pytest.fixture
def sample_catalog(sample_job_dicts):
    return InMemoryJobCatalog(sample_job_dicts)


@pytest.fixture
def scoring_service(sample_catalog):
    return ScoringService(config=ScorerConfig(), catalog=sample_catalog)
