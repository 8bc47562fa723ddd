from app.services.points.history import PointsHistoryReader
from app.services.points.leaderboard import LeaderboardReader

__all__ = ["PointsHistoryReader", "LeaderboardReader"]
