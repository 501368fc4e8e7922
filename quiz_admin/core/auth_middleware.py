from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quiz_admin.core.auth_provider import AuthProvider
from quiz_admin.core.dependencies import get_auth_provider, get_auth_service
from quiz_admin.core.exceptions import AccessDenied, AuthenticationFailed, AuthProviderError
from quiz_admin.models.user import User
from quiz_admin.services.auth import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None:
        raise AuthenticationFailed("Not authenticated")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    provider: AuthProvider = Depends(get_auth_provider),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    try:
        uid = await provider.verify_session(token)
    except AuthProviderError as e:
        raise AuthenticationFailed(e.message)

    user = await auth_service.get_user_profile(uid)
    if user is None:
        raise AuthenticationFailed("User profile not found")
    return user


async def get_current_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise AccessDenied()
    return user
