"""
Score Ranking - Core Package

This package contains the core modules for:
- Score log and player directory loading (scorerank.ingestion)
- Sorting, ranking and leaderboard rendering (scorerank.ranking)
- Shared configuration, errors and utilities
"""

__version__ = "1.0.0"

from scorerank.config import *
