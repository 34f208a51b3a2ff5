"""Session credential endpoints"""

from fastapi import APIRouter, Body, Response
from typing import Any, Dict, Optional

from ..config import settings
from ..schemas.auth import IdentityPayload, SessionResponse
from ..utils.auth import create_access_token, session_cookie_options
from ..utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/jwt", response_model=SessionResponse)
def issue_token(identity: IdentityPayload, response: Response):
    """
    Issue a session credential

    Signs the posted identity and sets it as an HTTP-only cookie.
    """
    token = create_access_token(identity.model_dump())

    cookie_options = session_cookie_options()
    if settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        cookie_options["max_age"] = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    response.set_cookie(settings.COOKIE_NAME, token, **cookie_options)

    logger.info("Session issued", email=identity.email)
    return SessionResponse()


@router.api_route("/logout", methods=["GET", "POST"], response_model=SessionResponse)
def logout(response: Response, user: Optional[Dict[str, Any]] = Body(default=None)):
    """
    Revoke the session credential

    Clears the cookie; succeeds whether or not a session existed.
    """
    logger.info("Logging out", user=user)
    response.delete_cookie(settings.COOKIE_NAME, **session_cookie_options())
    return SessionResponse()
