"""Query model"""

from sqlalchemy import Column, Integer, String, Text
from .base import Base, TimestampMixin


class Query(Base, TimestampMixin):
    """Product queries posted by users"""

    __tablename__ = "queries"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String(255), index=True)  # Owner of the query
    user_name = Column(String(255))
    user_image = Column(String(1000))
    product_name = Column(String(500))
    product_brand = Column(String(255))
    product_image = Column(String(1000))
    query_title = Column(String(500))
    boycotting_reason = Column(Text)
    details = Column(Text)
    # Adjusted only by recommendation create/delete, or explicitly on update
    recommendation_count = Column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<Query(id={self.id}, user_email='{self.user_email}', recommendation_count={self.recommendation_count})>"
