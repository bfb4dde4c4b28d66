"""
Shared fixtures for writing input files.
"""

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path
    return _write


@pytest.fixture
def score_file(write_file):
    return write_file(
        "scores.csv",
        "play_id,player_id,score\n"
        "p1,alice,80\n"
        "p2,bob,90\n"
        "p3,alice,90\n",
    )


@pytest.fixture
def player_file(write_file):
    return write_file(
        "players.csv",
        "player_id,handle_name\n"
        "alice,Alice\n"
        "bob,Bob\n",
    )
