from app.repositories.points.profiles import ProfileRepository
from app.repositories.points.transactions import PointsRepository

__all__ = ["PointsRepository", "ProfileRepository"]
