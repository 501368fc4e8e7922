from typing import List

from fastapi import APIRouter, Depends, status

from quiz_admin.core.auth_middleware import get_current_admin
from quiz_admin.core.dependencies import get_auth_service
from quiz_admin.models.user import User
from quiz_admin.schemas.req.user import UserCreateReq, UserUpdateReq
from quiz_admin.schemas.res.user import UserStats
from quiz_admin.services.auth import AuthService

users_router = APIRouter()


@users_router.get("/", response_model=List[User])
async def list_users(
    admin: User = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.list_users()


@users_router.get("/stats", response_model=UserStats)
async def user_stats(
    admin: User = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.user_stats()


@users_router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    req: UserCreateReq,
    admin: User = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.create_user(req, admin.uid)


@users_router.patch("/{uid}", response_model=User)
async def update_user(
    uid: str,
    req: UserUpdateReq,
    admin: User = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.update_user(uid, req, admin.uid)


@users_router.delete("/{uid}")
async def delete_user(
    uid: str,
    admin: User = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.delete_user(uid, admin.uid)
    return {"success": True}
