"""Governance domain models - proposals, votes, tallies."""

from app.models.governance.entities import Proposal, ProposalBallots, TalliedProposal, Vote
from app.models.governance.proposal import PROPOSALS_DDL, PROPOSALS_INDEXES
from app.models.governance.vote import VOTES_DDL, VOTES_INDEXES

__all__ = [
    "PROPOSALS_DDL",
    "PROPOSALS_INDEXES",
    "VOTES_DDL",
    "VOTES_INDEXES",
    "Proposal",
    "ProposalBallots",
    "Vote",
    "TalliedProposal",
]
