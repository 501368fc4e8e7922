from pydantic import EmailStr, Field, field_validator

from quiz_admin.models.base import CamelModel
from quiz_admin.models.user import UserRoleEnum


class UserCreateReq(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str
    role: UserRoleEnum = UserRoleEnum.STUDENT

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class UserUpdateReq(CamelModel):
    """Email is fixed once the account exists; only name and role change."""
    name: str
    role: UserRoleEnum

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value
