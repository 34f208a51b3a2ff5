"""Recommendation Store: recommendations and the cascading query counter"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..models import Query, Recommendation
from ..schemas.common import InsertResult, DeleteResult
from ..schemas.recommendation import RecommendationCreate
from ..utils.logging import get_logger
from ..utils.metrics import record_cascade

logger = get_logger(__name__)


class RecommendationStore:
    """
    CRUD over recommendations

    Creating or deleting a recommendation adjusts the parent query's
    ``recommendation_count`` by one. The row change and the counter change
    are committed in the same transaction, so a failure in either step
    leaves both untouched. A missing parent query is not an error: the
    recommendation is still written and the counter step matches nothing.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: RecommendationCreate) -> Tuple[InsertResult, Optional[Query]]:
        """
        Insert a recommendation and increment its parent's counter

        Args:
            data: Recommendation document

        Returns:
            Insert metadata and the parent query re-read after the increment
            (None if the parent does not exist)
        """

        recommendation = Recommendation(**data.model_dump())

        try:
            self.db.add(recommendation)
            self.db.flush()
            recommendation_id = recommendation.id
            matched = self._adjust_recommendation_count(data.query_id, 1)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error("Recommendation create rolled back", query_id=data.query_id, exc_info=True)
            raise

        record_cascade("create", matched)
        if not matched:
            logger.warning("Recommendation parent query missing", query_id=data.query_id, recommendation_id=recommendation_id)

        updated_query = self.db.query(Query).filter(Query.id == data.query_id).first()

        logger.info(
            "Recommendation created",
            recommendation_id=recommendation_id,
            query_id=data.query_id,
            recommendation_count=updated_query.recommendation_count if updated_query else None
        )
        return InsertResult(inserted_id=recommendation_id), updated_query

    def list_all(self) -> List[Recommendation]:
        return self.db.query(Recommendation).order_by(Recommendation.id.desc()).all()

    def list_by_recommender(self, email: str) -> List[Recommendation]:
        """Recommendations authored by ``email``"""
        return (
            self.db.query(Recommendation)
            .filter(Recommendation.recommender_email == email)
            .order_by(Recommendation.id.desc())
            .all()
        )

    def list_for_query_owner(self, email: str) -> List[Recommendation]:
        """Recommendations made against queries owned by ``email``"""
        return (
            self.db.query(Recommendation)
            .filter(Recommendation.user_email == email)
            .order_by(Recommendation.id.desc())
            .all()
        )

    def delete_by_id(self, recommendation_id: int) -> DeleteResult:
        """
        Delete a recommendation and decrement its parent's counter

        Raises:
            NotFoundError: If the recommendation does not exist; no query is
                modified in that case
        """

        recommendation = (
            self.db.query(Recommendation)
            .filter(Recommendation.id == recommendation_id)
            .first()
        )
        if recommendation is None:
            raise NotFoundError("Recommendation not found")

        query_id = recommendation.query_id

        try:
            self.db.delete(recommendation)
            self.db.flush()
            matched = self._adjust_recommendation_count(query_id, -1)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error("Recommendation delete rolled back", recommendation_id=recommendation_id, exc_info=True)
            raise

        record_cascade("delete", matched)
        if not matched:
            logger.warning("Recommendation parent query missing", query_id=query_id, recommendation_id=recommendation_id)

        logger.info("Recommendation deleted", recommendation_id=recommendation_id, query_id=query_id)
        return DeleteResult(deleted_count=1)

    def _adjust_recommendation_count(self, query_id: int, delta: int) -> int:
        """Add ``delta`` to the parent's counter; returns the number of queries matched"""

        return (
            self.db.query(Query)
            .filter(Query.id == query_id)
            .update(
                {Query.recommendation_count: Query.recommendation_count + delta},
                synchronize_session=False
            )
        )
