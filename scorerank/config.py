"""
Central configuration for the score ranking tool.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import logging

# --- Input Files ---
FILE_ENCODING = "utf-8"
FIELD_DELIMITER = ","
HEADER_LINES = 1  # Leading lines skipped in every input file

# Field layout: player_id,handle_name
PLAYER_FIELD_COUNT = 2

# Field layout: play_id,player_id,score
SCORE_FIELD_COUNT = 3
SCORE_PLAYER_FIELD = 1
SCORE_VALUE_FIELD = 2

# --- Ranking ---
RANK_LIMIT = 10  # Number of distinct rank positions shown
MIN_RANK_LIMIT = 1

# --- Output ---
LEADERBOARD_COLUMNS = ("rank", "player_id", "handle_name", "mean_score")

# --- Logging ---
DEFAULT_LOG_LEVEL = logging.WARNING
