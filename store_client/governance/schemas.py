"""Governance REST schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class VoteSchema(BaseModel):
    """Embedded ballot. Weight is left raw; the tally coerces it."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    choice: str
    weight: Any = None


class ProposalSchema(BaseModel):
    """Proposal row with its embedded votes."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    created_at: datetime
    title: str | None = None
    description: str | None = None
    creator_address: str | None = None
    status: str | None = None
    ends_at: datetime | None = None
    votes: list[VoteSchema] | None = None
