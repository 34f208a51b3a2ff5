"""Session credential signing and verification"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from ..config import settings

# Registered JWT claims are set by the server only
RESERVED_CLAIMS = frozenset({"sub", "aud", "iss", "exp", "nbf", "iat", "jti"})


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a session credential

    Registered claims posted by the caller are dropped and the identity's
    email is mirrored into ``sub``. An ``exp`` claim is only
    added when ``expires_delta`` is given or ACCESS_TOKEN_EXPIRE_MINUTES
    is configured.

    Args:
        data: Identity claims, must contain ``email``
        expires_delta: Optional token lifetime

    Returns:
        Encoded JWT
    """
    to_encode = {key: value for key, value in data.items() if key not in RESERVED_CLAIMS}
    to_encode["sub"] = to_encode.get("email")

    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode["exp"] = datetime.utcnow() + expires_delta

    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a session credential

    Raises:
        HTTPException: 401 if the token is malformed, tampered or expired
    """
    try:
        return jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized Access",
        )


def session_cookie_options() -> Dict[str, Any]:
    """Cookie flags for the session credential, relaxed outside production"""

    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": settings.COOKIE_SAMESITE,
    }
