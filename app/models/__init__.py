"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.governance import (
    PROPOSALS_DDL,
    PROPOSALS_INDEXES,
    VOTES_DDL,
    VOTES_INDEXES,
    Proposal,
    ProposalBallots,
    TalliedProposal,
    Vote,
)
from app.models.points import (
    POINTS_TRANSACTIONS_DDL,
    POINTS_TRANSACTIONS_INDEXES,
    PROFILES_DDL,
    LeaderboardEntry,
    PointsTransaction,
)

ALL_DDL = [
    # Governance
    PROPOSALS_DDL,
    VOTES_DDL,
    # Points
    POINTS_TRANSACTIONS_DDL,
    PROFILES_DDL,
    # Indexes
    *PROPOSALS_INDEXES,
    *VOTES_INDEXES,
    *POINTS_TRANSACTIONS_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Governance
    "PROPOSALS_DDL",
    "VOTES_DDL",
    "Proposal",
    "ProposalBallots",
    "Vote",
    "TalliedProposal",
    # Points
    "POINTS_TRANSACTIONS_DDL",
    "PROFILES_DDL",
    "PointsTransaction",
    "LeaderboardEntry",
    # All DDL
    "ALL_DDL",
]
