"""Query schemas"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel


class QueryBase(CamelModel):
    """Base query schema"""

    user_email: Optional[str] = None
    user_name: Optional[str] = None
    user_image: Optional[str] = None
    product_name: Optional[str] = None
    product_brand: Optional[str] = None
    product_image: Optional[str] = None
    query_title: Optional[str] = None
    boycotting_reason: Optional[str] = None
    details: Optional[str] = None


class QueryCreate(QueryBase):
    """Schema for creating a query"""

    recommendation_count: int = 0


class QueryUpdate(QueryBase):
    """Schema for merging fields into a query; unset fields are preserved"""

    recommendation_count: Optional[int] = None


class QueryResponse(QueryBase):
    """Schema for query response"""

    id: int = Field(..., alias="_id")
    recommendation_count: int
    created_at: datetime
    updated_at: datetime
