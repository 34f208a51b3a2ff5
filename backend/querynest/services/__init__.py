"""Data stores and maintenance services"""

from .query_store import QueryStore
from .recommendation_store import RecommendationStore
from .favorite_store import FavoriteStore
from .reconciliation import reconcile_recommendation_counts

__all__ = [
    "QueryStore",
    "RecommendationStore",
    "FavoriteStore",
    "reconcile_recommendation_counts",
]
