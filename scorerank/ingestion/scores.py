"""
Score Log Loader

Reads `play_id,player_id,score` records and folds every play of a player into
one running total. Means are derived once, after the whole log is consumed.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from scorerank.config import SCORE_FIELD_COUNT, SCORE_PLAYER_FIELD, SCORE_VALUE_FIELD
from scorerank.errors import ScoreParseError
from scorerank.ingestion.reader import read_records
from scorerank.ranking.engine import round_half_away
from scorerank.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Decimal float literal: 12, -3.5, .5, 7., 1e3, inf, infinity, nan (no spaces, no underscores)
SCORE_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass
class ScoreAccumulator:
    """Running score statistics for one player."""

    player_id: str
    total_score: float
    mean_score: float = 0.0
    play_count: int = 1

    def add(self, score: float) -> None:
        self.total_score += score
        self.play_count += 1

    def average(self) -> None:
        self.mean_score = round_half_away(self.total_score / self.play_count)


def parse_score(text: str) -> float:
    """
    Parse a score field.

    Raises:
        ValueError: If the text is not a decimal floating-point literal
    """
    if not SCORE_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def load_scores(score_path: Path) -> list[ScoreAccumulator]:
    """
    Load the score log and aggregate it per player.

    Args:
        score_path: Path to the score log file

    Returns:
        One ScoreAccumulator per distinct player, in first-seen order,
        with mean_score already computed

    Raises:
        IoOpenError, IoReadError, FormatError: On any unreadable or malformed input
        ScoreParseError: If a score field is not numeric
    """
    scores: dict[str, ScoreAccumulator] = {}
    plays = 0

    for line_number, fields in read_records(score_path, SCORE_FIELD_COUNT, "score file"):
        player_id = fields[SCORE_PLAYER_FIELD]
        try:
            score = parse_score(fields[SCORE_VALUE_FIELD])
        except ValueError as e:
            raise ScoreParseError(f"Invalid score: {e}", score_path, line_number) from e

        plays += 1
        accumulator = scores.get(player_id)
        if accumulator is None:
            scores[player_id] = ScoreAccumulator(player_id, score)
        else:
            accumulator.add(score)

    for accumulator in scores.values():
        accumulator.average()

    logger.info(f"Loaded {plays} plays for {len(scores)} players from {score_path}")
    return list(scores.values())
