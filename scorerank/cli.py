"""
Score Ranking CLI

Ranks players by their rounded mean score and prints the top positions.

Usage:
    scorerank SCORE_LOG PLAYER_DIRECTORY [--limit N] [--output PATH]
    OR
    python -m scorerank SCORE_LOG PLAYER_DIRECTORY
"""

import argparse
import logging
import sys
from pathlib import Path

from scorerank import __version__
from scorerank.config import DEFAULT_LOG_LEVEL, RANK_LIMIT
from scorerank.errors import (
    FormatError,
    IoOpenError,
    IoReadError,
    MissingPlayerError,
    ScoreParseError,
    ScoreRankError,
    UsageError,
)
from scorerank.ingestion.players import load_players
from scorerank.ingestion.scores import load_scores
from scorerank.ranking.engine import rank_scores, sort_scores, summarize_scores
from scorerank.ranking.leaderboard import build_leaderboard, render_leaderboard, write_leaderboard
from scorerank.utils import atomic_write_text, set_log_level, setup_logging, validate_rank_limit

# --- Module Logger ---
logger = setup_logging(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def parse_limit(text: str) -> int:
    try:
        limit = int(text)
        validate_rank_limit(limit)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return limit


def parse_log_level(text: str) -> int:
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown log level: {text}")
    return level


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="scorerank",
        description="Rank players by mean score and print the leaderboard.",
    )
    parser.add_argument("score_path", type=Path, help="score log (play_id,player_id,score)")
    parser.add_argument("player_path", type=Path, help="player directory (player_id,handle_name)")
    parser.add_argument(
        "--limit", type=parse_limit, default=RANK_LIMIT,
        help=f"number of distinct rank positions to show (default: {RANK_LIMIT})",
    )
    parser.add_argument("--output", type=Path, help="also write the leaderboard to this file")
    parser.add_argument(
        "--log-level", type=parse_log_level, default=DEFAULT_LOG_LEVEL,
        help="logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(score_path: Path, player_path: Path, limit: int = RANK_LIMIT) -> list[str]:
    """
    Run the whole pipeline and return the rendered leaderboard lines.

    Nothing is written anywhere; any failure raises before output exists.

    Raises:
        ScoreRankError: On any input or lookup failure
    """
    scores = load_scores(score_path)
    players = load_players(player_path)

    if logger.isEnabledFor(logging.DEBUG):
        summarize_scores(scores)
    sort_scores(scores)
    ranked = rank_scores(scores, limit)

    leaderboard_df = build_leaderboard(scores, ranked, players)
    return render_leaderboard(leaderboard_df)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"USAGE ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    set_log_level(args.log_level)

    try:
        lines = run(args.score_path, args.player_path, args.limit)
    except IoOpenError as e:
        print(f"OPEN ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except IoReadError as e:
        print(f"READ ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ScoreParseError as e:
        print(f"SCORE ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except FormatError as e:
        print(f"FORMAT ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except MissingPlayerError as e:
        print(f"PLAYER ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ScoreRankError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.output is not None:
        try:
            atomic_write_text("".join(line + "\n" for line in lines), args.output)
        except OSError as e:
            print(f"OUTPUT ERROR: Failed to write '{args.output}': {e}", file=sys.stderr)
            return EXIT_FAILURE
        logger.info(f"Leaderboard written to {args.output}")

    write_leaderboard(lines)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
