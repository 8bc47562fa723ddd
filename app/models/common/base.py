"""Base entity class for all domain entities."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, Self


@dataclass
class BaseEntity:
    """Base class for all entities."""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Build entity from a store row, ignoring columns it does not declare."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in row.items() if k in names})

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
