"""Services package - service class exports."""

from app.services.governance import ProposalTallyBuilder, tally_proposal
from app.services.points import LeaderboardReader, PointsHistoryReader

__all__ = [
    "ProposalTallyBuilder",
    "tally_proposal",
    "PointsHistoryReader",
    "LeaderboardReader",
]
