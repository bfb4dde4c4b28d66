"""
Leaderboard Rendering

Joins ranked entries with the player directory and renders the result as
comma-separated text lines, header first.
"""

import math
import sys
from decimal import Decimal
from typing import TYPE_CHECKING, TextIO

import pandas as pd

from scorerank.config import FIELD_DELIMITER, LEADERBOARD_COLUMNS
from scorerank.errors import MissingPlayerError
from scorerank.ranking.engine import RankedEntry
from scorerank.utils import setup_logging

if TYPE_CHECKING:
    from scorerank.ingestion.players import PlayerRecord
    from scorerank.ingestion.scores import ScoreAccumulator

# --- Module Logger ---
logger = setup_logging(__name__)


def format_score(value: float) -> str:
    """
    Render a mean score in plain positional notation.

    Digits are the shortest ones that round-trip (1e23 renders as 1 followed
    by 23 zeros), integral values carry no fractional part and the sign of
    negative zero is kept.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    digits = Decimal(repr(value))
    if value.is_integer():
        digits = digits.to_integral_value()
    return format(digits, "f")


def build_leaderboard(
    scores: list["ScoreAccumulator"],
    ranked: list[RankedEntry],
    players: dict[str, "PlayerRecord"],
) -> pd.DataFrame:
    """
    Join ranked entries with their handle names.

    Args:
        scores: Sorted accumulators the ranked entries index into
        ranked: Output of rank_scores
        players: Player directory

    Returns:
        DataFrame with columns [rank, player_id, handle_name, mean_score]

    Raises:
        MissingPlayerError: If a ranked player is not in the directory
    """
    rows = []
    for entry in ranked:
        score = scores[entry.index]
        player = players.get(score.player_id)
        if player is None:
            raise MissingPlayerError(score.player_id)

        rows.append({
            'rank': entry.rank,
            'player_id': score.player_id,
            'handle_name': player.handle_name,
            'mean_score': score.mean_score,
        })

    df = pd.DataFrame(rows, columns=list(LEADERBOARD_COLUMNS))
    df['rank'] = df['rank'].astype('int64')
    df['mean_score'] = df['mean_score'].astype('float64')
    return df


def render_leaderboard(leaderboard_df: pd.DataFrame) -> list[str]:
    """
    Render a leaderboard DataFrame as text lines.

    Args:
        leaderboard_df: Output of build_leaderboard

    Returns:
        Header line followed by one line per ranked player
    """
    lines = [FIELD_DELIMITER.join(LEADERBOARD_COLUMNS)]

    for row in leaderboard_df.itertuples(index=False):
        lines.append(FIELD_DELIMITER.join((
            str(row.rank),
            row.player_id,
            row.handle_name,
            format_score(row.mean_score),
        )))

    return lines


def write_leaderboard(lines: list[str], stream: TextIO | None = None) -> None:
    """Write rendered lines to a stream (default: stdout)."""
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
    logger.debug(f"Wrote {len(lines) - 1} leaderboard rows")
