"""
Error hierarchy for the score ranking pipeline.

Every failure is terminal for the run: loaders and the renderer raise one of
these and the CLI reports it without printing a partial leaderboard.
"""


class ScoreRankError(Exception):
    """Base exception for pipeline errors"""
    pass


class UsageError(ScoreRankError):
    """Wrong command-line arguments"""
    pass


class IoOpenError(ScoreRankError):
    """Raised when an input file cannot be opened"""
    pass


class IoReadError(ScoreRankError):
    """Raised when an input file fails mid-read"""
    pass


class FormatError(ScoreRankError):
    """Raised when a line does not have the expected number of fields"""

    def __init__(self, message: str, path=None, line_number: int | None = None):
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        super().__init__(message)


class ScoreParseError(FormatError):
    """Raised when a score field is not a floating-point number"""
    pass


class MissingPlayerError(ScoreRankError):
    """Raised when a ranked player is absent from the player directory"""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player '{player_id}' not found in player directory")
