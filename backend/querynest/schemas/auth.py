"""Session credential schemas"""

from pydantic import BaseModel, EmailStr
from typing import Any, Dict


class IdentityPayload(BaseModel):
    """Identity posted to /jwt; extra claims are kept in the token"""

    email: EmailStr

    class Config:
        extra = "allow"


class Identity(BaseModel):
    """Caller identity decoded from a valid session credential"""

    email: str
    claims: Dict[str, Any] = {}


class SessionResponse(BaseModel):
    """Response for issuing or revoking a session"""

    success: bool = True
