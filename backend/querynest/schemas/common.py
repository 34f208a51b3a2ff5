"""Shared schema configuration and write-result metadata"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON field names"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class InsertResult(CamelModel):
    """Outcome of inserting one document"""

    acknowledged: bool = True
    inserted_id: int


class UpdateResult(CamelModel):
    """Outcome of an update, including upserts"""

    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_count: int = 0
    upserted_id: Optional[int] = None


class DeleteResult(CamelModel):
    """Outcome of deleting by id"""

    acknowledged: bool = True
    deleted_count: int
