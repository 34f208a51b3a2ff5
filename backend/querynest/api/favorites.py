"""Favorite API endpoints"""

from fastapi import APIRouter, Depends
from typing import List

from ..schemas.common import InsertResult, DeleteResult
from ..schemas.favorite import FavoriteCreate, FavoriteResponse
from ..services import FavoriteStore
from ..utils.dependencies import get_current_identity, get_favorite_store, guard_write

router = APIRouter()


@router.post("/favorites", response_model=InsertResult, dependencies=[Depends(guard_write)])
def create_favorite(favorite: FavoriteCreate, store: FavoriteStore = Depends(get_favorite_store)):
    """Bookmark a query"""
    return store.create(favorite)


@router.get("/favorites", response_model=List[FavoriteResponse])
def list_favorites(store: FavoriteStore = Depends(get_favorite_store)):
    """List all favorites, newest first"""
    return store.list_all()


@router.get("/favorites/{email}", response_model=List[FavoriteResponse])
def list_user_favorites(email: str, store: FavoriteStore = Depends(get_favorite_store)):
    """List favorites owned by ``email``, newest first"""
    return store.list_by_owner(email)


@router.delete("/favorite/{favorite_id}", response_model=DeleteResult, dependencies=[Depends(get_current_identity)])
def delete_favorite(favorite_id: int, store: FavoriteStore = Depends(get_favorite_store)):
    """Delete a favorite"""
    return store.delete_by_id(favorite_id)
