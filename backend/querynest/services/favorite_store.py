"""Favorite Store: owner-scoped bookmarks with no cascading"""

from typing import List
from sqlalchemy.orm import Session

from ..models import Favorite
from ..schemas.common import InsertResult, DeleteResult
from ..schemas.favorite import FavoriteCreate
from ..utils.logging import get_logger

logger = get_logger(__name__)


class FavoriteStore:
    """CRUD over favorites"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: FavoriteCreate) -> InsertResult:
        favorite = Favorite(**data.model_dump())
        self.db.add(favorite)
        self.db.commit()
        self.db.refresh(favorite)

        logger.info("Favorite created", favorite_id=favorite.id, user_email=favorite.user_email)
        return InsertResult(inserted_id=favorite.id)

    def list_all(self) -> List[Favorite]:
        return self.db.query(Favorite).order_by(Favorite.id.desc()).all()

    def list_by_owner(self, email: str) -> List[Favorite]:
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_email == email)
            .order_by(Favorite.id.desc())
            .all()
        )

    def delete_by_id(self, favorite_id: int) -> DeleteResult:
        deleted = self.db.query(Favorite).filter(Favorite.id == favorite_id).delete(synchronize_session=False)
        self.db.commit()

        logger.info("Favorite deleted", favorite_id=favorite_id, deleted_count=deleted)
        return DeleteResult(deleted_count=deleted)
