#!/usr/bin/env python3
"""
Text Normalizer - canonical form for skill, level and location strings.
"""
import math
import re
from typing import Optional

_DISALLOWED_CHARS = re.compile(r"[^\w\s.#+-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """
    Canonicalize free text for comparison.

    Lowercases, folds punctuation other than ``.``, ``#``, ``+`` and ``-``
    into spaces, collapses whitespace runs and trims the ends.
    Idempotent: ``normalize_text(normalize_text(x)) == normalize_text(x)``.
    """
    if not text:
        return ""
    folded = _DISALLOWED_CHARS.sub(" ", str(text).lower())
    return _WHITESPACE.sub(" ", folded).strip()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))
