#!/usr/bin/env python3
"""
Ranking - filter, order, truncate and tier scored matches.

Order is an explicit key chain, each a tie-break on the previous:
match score desc, skill coverage desc, posting date desc (undated last).
The job board compared missing dates as NaN, which left undated jobs wherever
they happened to fall; here they are ranked after every dated tie instead.
"""

from typing import List, Optional, Sequence, Tuple
import logging

from core.config_loader import ScorerConfig
from core.matcher.normalizer import round_half_up
from core.scorer.models import MatchResult, TierSummary

logger = logging.getLogger(__name__)


def ranking_key(result: MatchResult) -> Tuple[int, int, int, float]:
    """Sort key placing better matches first when sorted ascending."""
    posted_at = result.job.posted_at
    has_date = 0 if posted_at is not None else 1
    recency = -posted_at.timestamp() if posted_at is not None else 0.0
    return (-result.match_score, -result.skill_coverage, has_date, recency)


def rank_results(
    results: Sequence[MatchResult],
    min_match_percentage: int = 15,
    limit: int = 20
) -> List[MatchResult]:
    """
    Keep results at or above the minimum percentage, best first, at most ``limit``.

    ``sorted`` is stable, so results equal on every key keep their input order.
    """
    kept = [r for r in results if r.match_percentage >= min_match_percentage]
    ranked = sorted(kept, key=ranking_key)
    logger.debug(f"Ranking kept {len(kept)}/{len(results)} results (min {min_match_percentage}%)")
    return ranked[:limit]


def summarize_tiers(
    results: Sequence[MatchResult],
    config: Optional[ScorerConfig] = None
) -> TierSummary:
    """
    Count results per quality tier.

    excellent >= 70, good 50-69, fair < 50 by default. This classifies the
    given list; it does not filter it.
    """
    config = config or ScorerConfig()
    excellent = len([r for r in results if r.match_percentage >= config.excellent_threshold])
    good = len([r for r in results
                if config.good_threshold <= r.match_percentage < config.excellent_threshold])
    fair = len([r for r in results if r.match_percentage < config.good_threshold])

    average = 0
    if results:
        average = round_half_up(sum(r.match_percentage for r in results) / len(results))

    return TierSummary(excellent=excellent, good=good, fair=fair, average_match=average)
