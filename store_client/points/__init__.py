"""Points REST client."""

from store_client.points.client import PointsClient
from store_client.points.schemas import PointsTransactionSchema, ProfileSchema

__all__ = [
    "PointsClient",
    "PointsTransactionSchema",
    "ProfileSchema",
]
