"""Recommendation API endpoints"""

from fastapi import APIRouter, Depends
from typing import List

from ..schemas.common import DeleteResult
from ..schemas.query import QueryResponse
from ..schemas.recommendation import (
    RecommendationCreate,
    RecommendationResponse,
    RecommendationCreateResponse
)
from ..services import RecommendationStore
from ..utils.dependencies import get_current_identity, get_recommendation_store, guard_write, require_owner

router = APIRouter()


@router.post("/recommendation", response_model=RecommendationCreateResponse, dependencies=[Depends(guard_write)])
def create_recommendation(
    recommendation: RecommendationCreate,
    store: RecommendationStore = Depends(get_recommendation_store)
):
    """
    Create a recommendation

    Increments the parent query's recommendation count and returns the
    query as re-read after the increment.
    """
    result, updated_query = store.create(recommendation)
    return RecommendationCreateResponse(
        result=result,
        updated_query=QueryResponse.model_validate(updated_query) if updated_query else None
    )


@router.get("/recommendation", response_model=List[RecommendationResponse], dependencies=[Depends(get_current_identity)])
def list_recommendations(store: RecommendationStore = Depends(get_recommendation_store)):
    """List all recommendations"""
    return store.list_all()


@router.get("/my-recommendation/{email}", response_model=List[RecommendationResponse], dependencies=[Depends(require_owner)])
def list_my_recommendations(email: str, store: RecommendationStore = Depends(get_recommendation_store)):
    """List recommendations authored by the caller"""
    return store.list_by_recommender(email)


@router.get("/recommendation-me/{email}", response_model=List[RecommendationResponse], dependencies=[Depends(require_owner)])
def list_recommendations_for_me(email: str, store: RecommendationStore = Depends(get_recommendation_store)):
    """List recommendations made against the caller's queries"""
    return store.list_for_query_owner(email)


@router.delete("/recommendation/{recommendation_id}", response_model=DeleteResult, dependencies=[Depends(guard_write)])
def delete_recommendation(recommendation_id: int, store: RecommendationStore = Depends(get_recommendation_store)):
    """
    Delete a recommendation

    Decrements the parent query's recommendation count. Responds 404 when
    the recommendation does not exist.
    """
    return store.delete_by_id(recommendation_id)
