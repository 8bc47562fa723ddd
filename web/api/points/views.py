"""Points API views - thin layer over services."""

from app.container import container

from .schemas import LeaderboardItem, LeaderboardResponse, PointsHistoryResponse, PointsTransactionItem


def get_points_history(wallet: str | None, limit: object = None) -> PointsHistoryResponse:
    """Get a wallet's most recent points transactions."""
    data = container.points_history.get_history(wallet, limit)

    items = [PointsTransactionItem(**t.to_dict()) for t in data]
    return PointsHistoryResponse(wallet=wallet, items=items)


def get_leaderboard(kind: str | None = None, limit: object = None) -> LeaderboardResponse:
    """Get the points or volume leaderboard."""
    kind = kind or "points"
    data = container.leaderboard.get_leaderboard(kind, limit)

    items = [
        LeaderboardItem(
            rank=e.rank,
            wallet=e.wallet,
            points=e.points,
            volume=e.volume,
            joined_at=e.joined_at,
        )
        for e in data
    ]

    return LeaderboardResponse(type=kind, leaderboard=items)
