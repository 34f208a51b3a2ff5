"""API routes"""

from fastapi import APIRouter
from .auth import router as auth_router
from .queries import router as queries_router
from .recommendations import router as recommendations_router
from .favorites import router as favorites_router

api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(queries_router, tags=["queries"])
api_router.include_router(recommendations_router, tags=["recommendations"])
api_router.include_router(favorites_router, tags=["favorites"])
