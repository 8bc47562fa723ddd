"""Governance API response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProposalItem(BaseModel):
    """Proposal with its vote tally."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str | None = None
    description: str | None = None
    creator_address: str | None = None
    status: str | None = None
    ends_at: datetime | None = None
    created_at: datetime
    vote_counts: dict[str, float] = Field(alias="voteCounts")
    total_weight: float = Field(alias="totalWeight")
    vote_count: int


class ProposalsResponse(BaseModel):
    """All proposals, newest first."""

    items: list[ProposalItem]
