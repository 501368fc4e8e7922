from typing import Optional

from fastapi import APIRouter, Depends, status

from quiz_admin.core.auth_middleware import get_bearer_token
from quiz_admin.core.dependencies import get_auth_service
from quiz_admin.core.error_handlers import error_response
from quiz_admin.schemas.req.auth import UserLoginReq
from quiz_admin.schemas.res.auth import LoginRes, MobileLoginResult, ProfileEnvelope
from quiz_admin.services.auth import AuthService

auth_router = APIRouter()


@auth_router.post("/login", response_model=LoginRes)
async def login(
    req: UserLoginReq,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Admin portal sign-in"""
    return await auth_service.admin_sign_in(req.email, req.password)


@auth_router.post("/logout")
async def logout(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.sign_out(token)
    return {"success": True}


@auth_router.post("/mobile-login", response_model=MobileLoginResult, response_model_exclude_none=True)
async def mobile_login(
    req: UserLoginReq,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Sign-in for any role; failures come back in the body, never as an error status"""
    return await auth_service.validate_mobile_login(req)


@auth_router.get("/profile", response_model=ProfileEnvelope, response_model_exclude_none=True)
async def get_profile(
    uid: Optional[str] = None,
    auth_service: AuthService = Depends(get_auth_service),
):
    if not uid:
        return error_response(status.HTTP_400_BAD_REQUEST, "User ID is required")

    user = await auth_service.get_user_profile(uid)
    if user is None:
        return error_response(status.HTTP_404_NOT_FOUND, "User not found")
    return ProfileEnvelope(success=True, user=user)
