"""Points domain models - ledger transactions and profile totals."""

from app.models.points.entities import LeaderboardEntry, PointsTransaction
from app.models.points.profile import PROFILES_DDL
from app.models.points.transaction import POINTS_TRANSACTIONS_DDL, POINTS_TRANSACTIONS_INDEXES

__all__ = [
    "POINTS_TRANSACTIONS_DDL",
    "POINTS_TRANSACTIONS_INDEXES",
    "PROFILES_DDL",
    "PointsTransaction",
    "LeaderboardEntry",
]
