#!/usr/bin/env python3
"""
Similarity Calculator - graded lexical similarity between skill strings.

Buckets:
    1.0         exact match of any variant pair
    (0.7, 0.9]  one variant contains the other
    (0.4, 0.7]  shared words between the normalized strings
    0.0         unrelated
"""
from core.matcher.normalizer import normalize_text
from core.matcher.synonyms import SKILL_SYNONYMS, SynonymTable, expand_variants

EXACT_SCORE = 1.0
CONTAINMENT_BASE = 0.7
CONTAINMENT_SPAN = 0.2
OVERLAP_BASE = 0.4
OVERLAP_SPAN = 0.3


class SimilarityCalculator:
    """Calculate synonym-aware similarity between two free-text skills."""

    def __init__(self, table: SynonymTable = SKILL_SYNONYMS):
        self.table = table

    def calculate(self, first: str, second: str) -> float:
        """
        Calculate similarity of two strings.

        Args:
            first: First skill, level or location string
            second: Second skill, level or location string

        Returns:
            Similarity in [0.0, 1.0]
        """
        s1 = normalize_text(first)
        s2 = normalize_text(second)

        variants1 = expand_variants(s1, self.table)
        variants2 = expand_variants(s2, self.table)

        for v1 in variants1:
            for v2 in variants2:
                if v1 == v2:
                    return EXACT_SCORE
                if v2 in v1 or v1 in v2:
                    shorter = min(len(v1), len(v2))
                    longer = max(len(v1), len(v2))
                    return CONTAINMENT_BASE + (shorter / longer) * CONTAINMENT_SPAN

        words1 = set(s1.split())
        words2 = set(s2.split())
        common = words1 & words2
        if common:
            return OVERLAP_BASE + (len(common) / max(len(words1), len(words2))) * OVERLAP_SPAN

        return 0.0


_default_calculator = SimilarityCalculator()


def calculate_similarity(first: str, second: str) -> float:
    """Similarity using the default synonym table."""
    return _default_calculator.calculate(first, second)
