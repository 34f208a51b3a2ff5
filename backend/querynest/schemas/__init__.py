"""Pydantic schemas for request/response validation"""

from .common import InsertResult, UpdateResult, DeleteResult
from .query import QueryCreate, QueryUpdate, QueryResponse
from .recommendation import RecommendationCreate, RecommendationResponse, RecommendationCreateResponse
from .favorite import FavoriteCreate, FavoriteResponse
from .auth import IdentityPayload, Identity, SessionResponse

__all__ = [
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
    "QueryCreate",
    "QueryUpdate",
    "QueryResponse",
    "RecommendationCreate",
    "RecommendationResponse",
    "RecommendationCreateResponse",
    "FavoriteCreate",
    "FavoriteResponse",
    "IdentityPayload",
    "Identity",
    "SessionResponse",
]
