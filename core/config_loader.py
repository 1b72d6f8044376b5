import yaml
import os
import logging
from typing import Optional
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ScoringThresholds(BaseModel):
    """
    Similarity thresholds and the points each tier awards.

    These heuristic constants are kept exactly as the job board shipped them:
    >= 1.0 exact (10), >= 0.8 strong (8), >= 0.6 partial (5), >= 0.4 weak (2).
    """
    exact: float = 1.0
    strong: float = 0.8
    partial: float = 0.6
    weak: float = 0.4

    exact_points: int = 10
    strong_points: int = 8
    partial_points: int = 5
    weak_points: int = 2


class ScorerConfig(BaseModel):
    """
    Configuration for the ScoringService.

    Handles composite scoring, bonuses, ranking and batch execution.
    """
    thresholds: ScoringThresholds = Field(default_factory=ScoringThresholds)

    # Flat bonuses when the job's level/location is similar enough
    bonus_similarity_threshold: float = 0.7
    experience_bonus: int = 5
    location_bonus: int = 5

    # Ranking
    min_match_percentage: int = 15
    result_limit: int = 20
    excellent_threshold: int = 70
    good_threshold: int = 50

    # Explanation
    explanation_threshold: float = 0.7
    max_recommendations: int = 3

    # Batch execution
    parallel_threshold: int = 200  # catalogs at least this large are scored on a thread pool
    max_workers: Optional[int] = None  # None = ThreadPoolExecutor default
    deadline_seconds: Optional[float] = None  # None = no deadline


class CatalogConfig(BaseModel):
    """Where the read-only job catalog is loaded from."""
    jobs_file: Optional[str] = None  # JSON array of job postings


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config.yaml found, using defaults")

    # Allow env var override for the job catalog
    env_jobs_file = os.environ.get("JOBS_FILE")
    if env_jobs_file:
        data.setdefault('catalog', {})
        data['catalog']['jobs_file'] = env_jobs_file

    # Allow env var override for web host/port
    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        data.setdefault('web', {})
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_web_port)

    env_min_match = os.environ.get("MIN_MATCH_PERCENTAGE")
    if env_min_match:
        data.setdefault('scorer', {})
        data['scorer']['min_match_percentage'] = int(env_min_match)

    return AppConfig(**data)
