"""Recommendation schemas"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel, InsertResult
from .query import QueryResponse


class RecommendationBase(CamelModel):
    """Base recommendation schema"""

    query_id: int
    query_title: Optional[str] = None
    product_name: Optional[str] = None
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    recommender_email: Optional[str] = None
    recommender_name: Optional[str] = None
    recommender_image: Optional[str] = None
    recommendation_title: Optional[str] = None
    recommended_product_name: Optional[str] = None
    recommended_product_image: Optional[str] = None
    recommendation_reason: Optional[str] = None


class RecommendationCreate(RecommendationBase):
    """Schema for creating a recommendation"""

    pass


class RecommendationResponse(RecommendationBase):
    """Schema for recommendation response"""

    id: int = Field(..., alias="_id")
    created_at: datetime
    updated_at: datetime


class RecommendationCreateResponse(CamelModel):
    """Insert outcome plus the parent query as re-read after the increment"""

    result: InsertResult
    updated_query: Optional[QueryResponse] = None
