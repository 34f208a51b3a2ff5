"""Favorite model"""

from sqlalchemy import Column, Integer, String, Text
from .base import Base, TimestampMixin


class Favorite(Base, TimestampMixin):
    """Bookmarked queries; query details are copied, not referenced"""

    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String(255), index=True)  # Owner of the bookmark
    user_name = Column(String(255))
    query_id = Column(Integer)
    query_title = Column(String(500))
    product_name = Column(String(500))
    product_brand = Column(String(255))
    product_image = Column(String(1000))
    boycotting_reason = Column(Text)

    def __repr__(self):
        return f"<Favorite(id={self.id}, user_email='{self.user_email}', query_id={self.query_id})>"
