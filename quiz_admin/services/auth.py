import logging
from typing import List, Optional

from quiz_admin.core.auth_provider import AuthProvider
from quiz_admin.core.database import USERS, DocumentStore, DocumentStoreError, StoredDocument
from quiz_admin.core.exceptions import (
    AccessDenied,
    AuthenticationFailed,
    AuthProviderError,
    ProfileNotFound,
    QuizAdminError,
    SelfDeletionForbidden,
    SignOutFailed,
    UserCreationFailed,
)
from quiz_admin.helpers.clock import now_ms
from quiz_admin.models.user import User, UserRoleEnum
from quiz_admin.schemas.req.auth import UserLoginReq
from quiz_admin.schemas.req.user import UserCreateReq, UserUpdateReq
from quiz_admin.schemas.res.auth import LoginRes, MobileLoginResult
from quiz_admin.schemas.res.user import UserStats

logger = logging.getLogger('services')


class AuthService:
    """
    Every identity operation goes through here: the auth provider and the
    ``users`` collection are only touched together, and profiles are only
    ever written under their ``uid``.
    """

    def __init__(self, store: DocumentStore, provider: AuthProvider):
        self.store = store
        self.provider = provider

    @staticmethod
    def _to_user(doc: StoredDocument, key_is_uid: bool = False) -> User:
        data = dict(doc.data)
        if key_is_uid or not data.get("uid"):
            data["uid"] = doc.key
        return User.model_validate(data)

    async def _write_profile(self, user: User) -> None:
        await self.store.set(USERS, user.uid, user.to_document())

    async def sign_in(self, email: str, password: str) -> LoginRes:
        try:
            session = await self.provider.sign_in(email, password)
        except AuthProviderError as e:
            logger.warning(f"Login failed for {email}: {e.message}")
            raise AuthenticationFailed(f"Login failed: {e.message}")

        user = await self.get_user_profile(session.uid)
        if user is None:
            logger.error(f"Account {session.uid} signed in without a profile document")
            raise ProfileNotFound("Login failed: User profile not found")

        user.last_login_at = now_ms()
        await self.store.update(USERS, user.uid, {"lastLoginAt": user.last_login_at})
        logger.info("Signed in", extra={'user': user.uid})
        return LoginRes(user=user, access_token=session.token)

    async def admin_sign_in(self, email: str, password: str) -> LoginRes:
        """Sign in for the admin portal; non-admins are signed straight back out."""
        login = await self.sign_in(email, password)
        if not login.user.is_admin:
            await self.sign_out(login.access_token)
            raise AccessDenied("Access denied: admin privileges required")
        return login

    async def create_user(self, data: UserCreateReq, actor_id: str) -> User:
        try:
            uid = await self.provider.create_account(data.email, data.password)
        except AuthProviderError as e:
            raise UserCreationFailed(f"User creation failed: {e.message}")

        user = User(
            uid=uid,
            email=data.email,
            name=data.name,
            role=data.role,
            created_at=now_ms(),
            created_by=actor_id,
            is_active=True,
            last_login_at=None,
        )
        try:
            await self._write_profile(user)
        except DocumentStoreError as e:
            # the account stays behind without a profile; nothing rolls it back
            logger.error(f"Profile write failed for new account {uid} ({data.email})", extra={'user': actor_id})
            raise UserCreationFailed(f"User creation failed: {e.message}") from e

        logger.info(f"Created {user.role.value} {user.email} ({uid})", extra={'user': actor_id})
        return user

    async def get_user_profile(self, uid: str) -> Optional[User]:
        """None means there is no profile; store failures are raised, not folded into None."""
        try:
            doc = await self.store.get(USERS, uid)
        except DocumentStoreError as e:
            logger.error(f"Error fetching user profile {uid}: {e.message}")
            raise
        if doc is None:
            return None
        return self._to_user(doc)

    async def sign_out(self, token: str) -> None:
        try:
            await self.provider.sign_out(token)
        except AuthProviderError as e:
            raise SignOutFailed(f"Sign out failed: {e.message}")

    async def is_admin(self, uid: str) -> bool:
        user = await self.get_user_profile(uid)
        return user is not None and user.is_admin

    async def validate_mobile_login(self, credentials: UserLoginReq) -> MobileLoginResult:
        try:
            login = await self.sign_in(credentials.email, credentials.password)
        except QuizAdminError as e:
            return MobileLoginResult(success=False, error=e.message)
        except Exception as e:
            logger.exception("Unexpected mobile login failure")
            return MobileLoginResult(success=False, error=str(e) or "Login failed")
        return MobileLoginResult(success=True, user=login.user, access_token=login.access_token)

    async def list_users(self) -> List[User]:
        docs = await self.store.get_all(USERS)
        return [self._to_user(doc, key_is_uid=True) for doc in docs]

    async def update_user(self, uid: str, data: UserUpdateReq, actor_id: str) -> User:
        fields = {
            "name": data.name,
            "role": data.role.value,
            "updatedAt": now_ms(),
            "updatedBy": actor_id,
        }
        if not await self.store.update(USERS, uid, fields):
            raise ProfileNotFound()
        logger.info(f"Updated user {uid}", extra={'user': actor_id})
        return await self.get_user_profile(uid)

    async def delete_user(self, uid: str, actor_id: str) -> None:
        if uid == actor_id:
            raise SelfDeletionForbidden()
        if await self.store.get(USERS, uid) is None:
            raise ProfileNotFound()

        await self.store.delete(USERS, uid)
        try:
            await self.provider.delete_account(uid)
        except AuthProviderError as e:
            # profiles left by the migration bug may have no account under this uid
            logger.warning(f"Profile {uid} deleted but account removal failed: {e.message}", extra={'user': actor_id})
        logger.info(f"Deleted user {uid}", extra={'user': actor_id})

    async def user_stats(self) -> UserStats:
        users = await self.list_users()
        admins = sum(1 for user in users if user.role == UserRoleEnum.ADMIN)
        students = sum(1 for user in users if user.role == UserRoleEnum.STUDENT)
        return UserStats(total=len(users), admins=admins, students=students)
