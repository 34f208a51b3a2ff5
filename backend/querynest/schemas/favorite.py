"""Favorite schemas"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from .common import CamelModel


class FavoriteBase(CamelModel):
    """Base favorite schema"""

    user_email: Optional[str] = None
    user_name: Optional[str] = None
    query_id: Optional[int] = None
    query_title: Optional[str] = None
    product_name: Optional[str] = None
    product_brand: Optional[str] = None
    product_image: Optional[str] = None
    boycotting_reason: Optional[str] = None


class FavoriteCreate(FavoriteBase):
    """Schema for creating a favorite"""

    pass


class FavoriteResponse(FavoriteBase):
    """Schema for favorite response"""

    id: int = Field(..., alias="_id")
    created_at: datetime
    updated_at: datetime
