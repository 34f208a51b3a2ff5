"""Access guard and store dependencies for FastAPI"""

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session
from typing import Optional

from .auth import decode_token
from .database import get_db
from .logging import get_logger
from ..config import settings
from ..schemas.auth import Identity
from ..services import QueryStore, RecommendationStore, FavoriteStore

logger = get_logger(__name__)

session_cookie = APIKeyCookie(name=settings.COOKIE_NAME, auto_error=False)


def authenticate(token: Optional[str]) -> Identity:
    """
    Derive the caller's identity from a session credential

    Args:
        token: Raw cookie value, if any

    Returns:
        Decoded identity

    Raises:
        HTTPException: 401 if the credential is missing or invalid
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized Access",
        )

    try:
        payload = decode_token(token)
    except HTTPException:
        logger.info("Rejected session credential")
        raise

    email = payload.get("email") or payload.get("sub")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized Access",
        )

    return Identity(email=email, claims=payload)


def authorize_owner(identity: Identity, resource_owner_email: str) -> Identity:
    """
    Ensure the caller owns the scoped resource

    Raises:
        HTTPException: 403 if the emails differ
    """
    if identity.email != resource_owner_email:
        logger.info("Owner mismatch", caller=identity.email, owner=resource_owner_email)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden Access",
        )
    return identity


async def get_current_identity(token: Optional[str] = Depends(session_cookie)) -> Identity:
    """Require a valid session credential"""
    return authenticate(token)


async def require_owner(email: str, identity: Identity = Depends(get_current_identity)) -> Identity:
    """Require a valid session whose email matches the ``email`` path parameter"""
    return authorize_owner(identity, email)


async def guard_write(token: Optional[str] = Depends(session_cookie)) -> Optional[Identity]:
    """
    Guard for write routes that are public by default

    Enforces authentication only when GUARD_ALL_WRITES is enabled.
    """
    if not settings.GUARD_ALL_WRITES:
        return None
    return authenticate(token)


def get_query_store(db: Session = Depends(get_db)) -> QueryStore:
    return QueryStore(db)


def get_recommendation_store(db: Session = Depends(get_db)) -> RecommendationStore:
    return RecommendationStore(db)


def get_favorite_store(db: Session = Depends(get_db)) -> FavoriteStore:
    return FavoriteStore(db)
