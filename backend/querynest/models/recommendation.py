"""Recommendation model"""

from sqlalchemy import Column, Integer, String, Text, Index
from .base import Base, TimestampMixin


class Recommendation(Base, TimestampMixin):
    """Alternatives suggested by users against a query"""

    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, index=True)
    # Plain reference: the parent query is not required to exist
    query_id = Column(Integer, nullable=False)
    query_title = Column(String(500))
    product_name = Column(String(500))
    user_email = Column(String(255))  # Owner of the parent query
    user_name = Column(String(255))
    recommender_email = Column(String(255))
    recommender_name = Column(String(255))
    recommender_image = Column(String(1000))
    recommendation_title = Column(String(500))
    recommended_product_name = Column(String(500))
    recommended_product_image = Column(String(1000))
    recommendation_reason = Column(Text)

    __table_args__ = (
        Index('ix_recommendation_query_id', 'query_id'),
        Index('ix_recommendation_recommender_email', 'recommender_email'),
        Index('ix_recommendation_user_email', 'user_email'),
    )

    def __repr__(self):
        return f"<Recommendation(id={self.id}, query_id={self.query_id}, recommender_email='{self.recommender_email}')>"
