"""Database models"""

from .query import Query
from .recommendation import Recommendation
from .favorite import Favorite

__all__ = [
    "Query",
    "Recommendation",
    "Favorite",
]
