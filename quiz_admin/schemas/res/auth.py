from typing import Optional

from pydantic import BaseModel

from quiz_admin.models.base import CamelModel
from quiz_admin.models.user import User


class LoginRes(CamelModel):
    user: User
    access_token: str
    token_type: str = "bearer"


class MobileLoginResult(CamelModel):
    """What the mobile login adapter hands back instead of raising."""
    success: bool
    user: Optional[User] = None
    access_token: Optional[str] = None
    error: Optional[str] = None


class ProfileEnvelope(BaseModel):
    success: bool
    user: Optional[User] = None
    error: Optional[str] = None
