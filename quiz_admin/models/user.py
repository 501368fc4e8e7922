from enum import Enum
from typing import Optional

from quiz_admin.models.base import CamelModel


class UserRoleEnum(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class User(CamelModel):
    """Profile document of the ``users`` collection, expected to be keyed by ``uid``."""
    uid: str
    email: str = ""
    name: str = ""
    role: UserRoleEnum = UserRoleEnum.STUDENT
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    last_login_at: Optional[int] = None
    is_active: Optional[bool] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRoleEnum.ADMIN
