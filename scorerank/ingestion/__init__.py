"""
Data Ingestion

Modules:
- reader: Header-skipping delimited line reader shared by both loaders
- players: Player directory loading
- scores: Score log loading and per-player aggregation
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "read_records":
        from scorerank.ingestion.reader import read_records
        return read_records
    if name == "load_players":
        from scorerank.ingestion.players import load_players
        return load_players
    if name == "load_scores":
        from scorerank.ingestion.scores import load_scores
        return load_scores
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
