"""Query Store: owns query documents"""

from typing import List, Optional
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import Query
from ..schemas.common import InsertResult, UpdateResult, DeleteResult
from ..schemas.query import QueryCreate, QueryUpdate
from ..utils.logging import get_logger

logger = get_logger(__name__)


class QueryStore:
    """
    CRUD over product queries

    Listings are newest first; ids are assigned in insertion order so the
    id doubles as the creation sequence.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: QueryCreate) -> InsertResult:
        """Insert a query; ``recommendation_count`` defaults to 0"""

        query = Query(**data.model_dump())
        self.db.add(query)
        self.db.commit()
        self.db.refresh(query)

        logger.info("Query created", query_id=query.id, user_email=query.user_email)
        return InsertResult(inserted_id=query.id)

    def list_all(self) -> List[Query]:
        return self.db.query(Query).order_by(Query.id.desc()).all()

    def list_by_owner(self, email: str) -> List[Query]:
        return (
            self.db.query(Query)
            .filter(Query.user_email == email)
            .order_by(Query.id.desc())
            .all()
        )

    def get_by_id(self, query_id: int) -> Optional[Query]:
        return self.db.query(Query).filter(Query.id == query_id).first()

    def update(self, query_id: int, data: QueryUpdate) -> UpdateResult:
        """
        Merge the supplied fields into a query, creating it if absent

        Fields left unset in ``data`` keep their stored value, including
        ``recommendation_count``.

        Args:
            query_id: Id of the query to update or create
            data: Partial query document

        Returns:
            Update metadata; ``upserted_id`` is set when a query was created
        """

        update_data = data.model_dump(exclude_unset=True)
        query = self.get_by_id(query_id)

        if query is None:
            upserted = self._insert_with_id(query_id, update_data)
            if upserted is not None:
                return upserted
            # Lost an insert race: the query exists now, merge into it
            query = self.get_by_id(query_id)

        modified = False
        for field, value in update_data.items():
            if field == "recommendation_count" and value is None:
                continue
            if getattr(query, field) != value:
                setattr(query, field, value)
                modified = True

        self.db.commit()
        logger.info("Query updated", query_id=query_id, modified=modified)
        return UpdateResult(matched_count=1, modified_count=1 if modified else 0)

    def _insert_with_id(self, query_id: int, update_data: dict) -> Optional[UpdateResult]:
        """Insert a query under ``query_id``; None if the id was taken concurrently"""

        insert_data = dict(update_data)
        if insert_data.get("recommendation_count") is None:
            insert_data.pop("recommendation_count", None)

        try:
            self.db.add(Query(id=query_id, **insert_data))
            self.db.flush()
            self._sync_id_sequence()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Query upsert conflicted, retrying as update", query_id=query_id)
            return None

        logger.info("Query upserted", query_id=query_id)
        return UpdateResult(
            matched_count=0,
            modified_count=0,
            upserted_count=1,
            upserted_id=query_id
        )

    def _sync_id_sequence(self) -> None:
        # Explicit ids bypass the PostgreSQL serial sequence
        if self.db.get_bind().dialect.name != "postgresql":
            return
        self.db.execute(text(
            "SELECT setval(pg_get_serial_sequence('queries', 'id'), "
            "(SELECT MAX(id) FROM queries))"
        ))

    def delete_by_id(self, query_id: int) -> DeleteResult:
        """Delete a query; a missing id reports zero deleted documents"""

        deleted = self.db.query(Query).filter(Query.id == query_id).delete(synchronize_session=False)
        self.db.commit()

        logger.info("Query deleted", query_id=query_id, deleted_count=deleted)
        return DeleteResult(deleted_count=deleted)
