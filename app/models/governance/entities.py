"""Governance domain entities - proposals, ballots and computed tallies."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.models.common import BaseEntity


@dataclass
class Proposal(BaseEntity):
    """A governance item up for vote."""

    id: str
    created_at: datetime
    title: str | None = None
    description: str | None = None
    creator_address: str | None = None
    status: str | None = None
    ends_at: datetime | None = None


@dataclass
class Vote(BaseEntity):
    """One ballot with its weight already coerced to a number."""

    proposal_id: str
    choice: str
    weight: float


@dataclass
class TalliedProposal(Proposal):
    """Proposal with weighted vote aggregates."""

    vote_counts: dict[str, float] = field(default_factory=dict)
    total_weight: float = 0
    vote_count: int = 0


@dataclass
class ProposalBallots(BaseEntity):
    """Proposal joined with its ballot rows exactly as the store returned them."""

    proposal: Proposal
    ballots: list[dict[str, Any]] = field(default_factory=list)
