#!/usr/bin/env python3
"""
Matching engine exceptions.

The engine itself is total for well-typed input; these are raised only for
malformed requests and for lookups the job catalog cannot resolve.
"""


class MatchingError(Exception):
    """Base exception for matching engine errors."""
    pass


class SkillValidationError(MatchingError):
    """Raised when candidate skills or explanation fields are missing or malformed."""
    pass


class JobNotFoundError(MatchingError):
    """Raised when a job identifier cannot be resolved by the catalog."""
    pass


class CatalogError(MatchingError):
    """Raised when a job catalog file contains entries that cannot be loaded."""
    pass


class MatchingTimeoutError(MatchingError):
    """Raised when scoring does not finish before the configured deadline."""
    pass
