"""Query API endpoints"""

from fastapi import APIRouter, Depends
from typing import List, Optional

from ..schemas.common import InsertResult, UpdateResult, DeleteResult
from ..schemas.query import QueryCreate, QueryUpdate, QueryResponse
from ..services import QueryStore
from ..utils.dependencies import get_current_identity, get_query_store, guard_write, require_owner

router = APIRouter()


@router.get("/queries", response_model=List[QueryResponse])
def list_queries(store: QueryStore = Depends(get_query_store)):
    """List all queries, newest first"""
    return store.list_all()


@router.get("/queries/{email}", response_model=List[QueryResponse], dependencies=[Depends(require_owner)])
def list_my_queries(email: str, store: QueryStore = Depends(get_query_store)):
    """List the caller's own queries, newest first"""
    return store.list_by_owner(email)


@router.post("/queries", response_model=InsertResult, dependencies=[Depends(guard_write)])
def create_query(query: QueryCreate, store: QueryStore = Depends(get_query_store)):
    """Create a query"""
    return store.create(query)


@router.get("/query/{query_id}", response_model=Optional[QueryResponse], dependencies=[Depends(get_current_identity)])
def get_query(query_id: int, store: QueryStore = Depends(get_query_store)):
    """Get a single query; responds with null when it does not exist"""
    return store.get_by_id(query_id)


@router.put("/query/{query_id}", response_model=UpdateResult, dependencies=[Depends(guard_write)])
def update_query(query_id: int, query_update: QueryUpdate, store: QueryStore = Depends(get_query_store)):
    """Merge fields into a query, creating it if absent"""
    return store.update(query_id, query_update)


@router.delete("/query/{query_id}", response_model=DeleteResult, dependencies=[Depends(get_current_identity)])
def delete_query(query_id: int, store: QueryStore = Depends(get_query_store)):
    """Delete a query"""
    return store.delete_by_id(query_id)
