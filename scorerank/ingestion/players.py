"""
Player Directory Loader

Reads `player_id,handle_name` records into a lookup table keyed by player id.
A repeated player id replaces the earlier record.
"""

from dataclasses import dataclass
from pathlib import Path

from scorerank.config import PLAYER_FIELD_COUNT
from scorerank.ingestion.reader import read_records
from scorerank.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass(frozen=True)
class PlayerRecord:
    player_id: str
    handle_name: str


def load_players(player_path: Path) -> dict[str, PlayerRecord]:
    """
    Load the player directory.

    Args:
        player_path: Path to the player directory file

    Returns:
        Mapping of player_id to PlayerRecord

    Raises:
        IoOpenError, IoReadError, FormatError: On any unreadable or malformed input
    """
    players: dict[str, PlayerRecord] = {}
    records = 0

    for _, (player_id, handle_name) in read_records(player_path, PLAYER_FIELD_COUNT, "player file"):
        records += 1
        if player_id in players:
            logger.debug(f"Duplicate player id '{player_id}', keeping the later record")
        players[player_id] = PlayerRecord(player_id, handle_name)

    logger.info(f"Loaded {len(players)} players from {records} records in {player_path}")
    return players
