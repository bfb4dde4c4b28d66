"""
Ranking Engine

This module turns aggregated per-player scores into a ranked view:
- Means are rounded half away from zero (2.5 -> 3, -2.5 -> -3)
- Players are ordered by mean score descending, then player id ascending
- Ranks are dense: tied means share a rank and the next mean gets rank + 1
- Ranking stops after `limit` distinct ranks, never splitting a tied group

Usage:
    from scorerank.ranking.engine import sort_scores, rank_scores

    sort_scores(scores)
    ranked = rank_scores(scores, limit=10)
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

import pandas as pd

from scorerank.config import RANK_LIMIT
from scorerank.utils import setup_logging, validate_rank_limit

if TYPE_CHECKING:
    from scorerank.ingestion.scores import ScoreAccumulator

# --- Module Logger ---
logger = setup_logging(__name__)

# Every float at or above 2**52 in magnitude is already an integer
INTEGRAL_FLOAT_THRESHOLD = 2.0 ** 52


@dataclass(frozen=True)
class RankedEntry:
    """A rank paired with the position of its accumulator in the sorted list."""

    rank: int
    index: int


def round_half_away(value: float) -> float:
    """
    Round to the nearest integer, with halves going away from zero.

    Python's round() uses banker's rounding (round(2.5) == 2), so the
    rounding is done on the exact decimal value of the float instead.
    Non-finite values and floats too large to have a fraction are
    returned unchanged.
    """
    if not math.isfinite(value) or abs(value) >= INTEGRAL_FLOAT_THRESHOLD:
        return value
    return float(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def sort_key(score: "ScoreAccumulator") -> tuple[bool, float, str]:
    """Order by mean score descending, then player id ascending; NaN means last."""
    if math.isnan(score.mean_score):
        return (True, 0.0, score.player_id)
    return (False, -score.mean_score, score.player_id)


def sort_scores(scores: list["ScoreAccumulator"]) -> None:
    """Sort accumulators in place into leaderboard order."""
    scores.sort(key=sort_key)


def rank_scores(scores: list["ScoreAccumulator"], limit: int = RANK_LIMIT) -> list[RankedEntry]:
    """
    Assign dense competition ranks to sorted accumulators.

    Args:
        scores: Accumulators already ordered by sort_scores
        limit: Number of distinct rank positions to emit

    Returns:
        RankedEntry values in sorted order. Every entry of rank `limit` is
        included; nothing of rank `limit + 1` is.

    Raises:
        ValueError: If limit is below 1
    """
    validate_rank_limit(limit)

    ranked: list[RankedEntry] = []
    rank = 1

    for index, score in enumerate(scores):
        ranked.append(RankedEntry(rank, index))

        next_index = index + 1
        if next_index < len(scores) and scores[next_index].mean_score != score.mean_score:
            rank += 1

        if rank > limit:
            break

    if len(ranked) < len(scores):
        logger.info(f"Ranked {len(ranked)} of {len(scores)} players (limit: {limit} ranks)")
    else:
        logger.info(f"Ranked all {len(ranked)} players")
    return ranked


def summarize_scores(scores: list["ScoreAccumulator"]) -> pd.DataFrame:
    """
    Build a per-player statistics table and log the mean score distribution.

    Args:
        scores: Aggregated accumulators

    Returns:
        DataFrame with columns [player_id, play_count, total_score, mean_score]
    """
    df = pd.DataFrame(
        [
            {
                'player_id': s.player_id,
                'play_count': s.play_count,
                'total_score': s.total_score,
                'mean_score': s.mean_score,
            }
            for s in scores
        ],
        columns=['player_id', 'play_count', 'total_score', 'mean_score'],
    )

    if not df.empty:
        means = df['mean_score']
        logger.debug("Mean Score Distribution:")
        logger.debug(f"  Players: {len(df)}")
        logger.debug(f"  Plays: {df['play_count'].sum()}")
        logger.debug(f"  Min: {means.min():.2f}")
        logger.debug(f"  Max: {means.max():.2f}")
        logger.debug(f"  Mean: {means.mean():.2f}")
        logger.debug(f"  Median: {means.median():.2f}")
        logger.debug(f"  Distinct means: {means.nunique()}")

    return df
