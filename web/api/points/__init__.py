"""Points API."""

from web.api.points.views import get_leaderboard, get_points_history

__all__ = [
    "get_points_history",
    "get_leaderboard",
]
