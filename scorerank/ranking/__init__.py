"""
Ranking

Modules:
- engine: Mean rounding, ordering and dense competition ranking
- leaderboard: Join with the player directory and text rendering
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "sort_scores":
        from scorerank.ranking.engine import sort_scores
        return sort_scores
    if name == "rank_scores":
        from scorerank.ranking.engine import rank_scores
        return rank_scores
    if name == "build_leaderboard":
        from scorerank.ranking.leaderboard import build_leaderboard
        return build_leaderboard
    if name == "render_leaderboard":
        from scorerank.ranking.leaderboard import render_leaderboard
        return render_leaderboard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
