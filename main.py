#!/usr/bin/env python3
"""
SkillMatch command line - rank a JSON job catalog against a set of skills.

Usage:
    uv run python main.py --jobs jobs.json --skills "Python, React, AWS"
    uv run python main.py --skills python --explain 65f1c2
"""
import sys
import json
import logging
import argparse

from core.config_loader import load_config
from core.exceptions import CatalogError, MatchingError
from core.job_catalog import load_catalog
from core.scorer import MatchRequest, ScoringService
from web.backend.models.responses import MatchJobsResponse, MatchExplanationResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_skills(raw: str):
    """Split a comma separated skill list, dropping blanks."""
    return [s.strip() for s in raw.split(",") if s.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank jobs against a candidate's skills")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("--jobs", help="JSON job catalog (overrides catalog.jobs_file)")
    parser.add_argument("--skills", required=True, help="Comma separated candidate skills")
    parser.add_argument("--experience-level", help="Candidate experience level")
    parser.add_argument("--location", help="Preferred job location")
    parser.add_argument("--min-match", type=int, help="Minimum match percentage")
    parser.add_argument("--explain", metavar="JOB_ID", help="Explain a single job instead of ranking")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    jobs_file = args.jobs or config.catalog.jobs_file
    if not jobs_file:
        logger.error("No job catalog given: pass --jobs or set catalog.jobs_file")
        return 2

    try:
        catalog = load_catalog(jobs_file)
    except FileNotFoundError:
        logger.error(f"Job catalog not found: {jobs_file}")
        return 2
    except CatalogError as e:
        logger.error(str(e))
        return 2

    service = ScoringService(config=config.scorer, catalog=catalog)
    skills = parse_skills(args.skills)

    try:
        if args.explain:
            explanation = service.explain(args.explain, skills)
            payload = MatchExplanationResponse.from_explanation(explanation)
        else:
            ranked = service.match_jobs(MatchRequest(
                skills=skills,
                experience_level=args.experience_level,
                location=args.location,
                min_match_percentage=args.min_match
            ))
            payload = MatchJobsResponse.from_ranked(ranked)
    except MatchingError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(payload.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
