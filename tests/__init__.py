#!/usr/bin/env python3
"""
Test suite for the SkillMatch engine and web API.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Run only engine tests
    uv run python -m pytest tests/unit/core -v

    # Web API tests only (need httpx installed)
    uv run python -m pytest tests/unit/web -v
"""
