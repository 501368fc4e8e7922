import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from quiz_admin.core.database import DocumentStore, new_key
from quiz_admin.core.exceptions import AuthProviderError
from quiz_admin.helpers.clock import now_ms
from quiz_admin.helpers.jwt_handler import JWT, JWTError
from quiz_admin.helpers.password import PasswordHandler

logger = logging.getLogger('infrastructure')

ACCOUNTS = "auth_accounts"
SESSIONS = "auth_sessions"

MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthSession:
    uid: str
    token: str


class AuthProvider(ABC):
    """Email/password identity service. Every failure is an ``AuthProviderError``."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        raise NotImplementedError

    @abstractmethod
    async def create_account(self, email: str, password: str) -> str:
        """Returns the uid issued for the new account."""
        raise NotImplementedError

    @abstractmethod
    async def sign_out(self, token: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_account(self, uid: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def verify_session(self, token: str) -> str:
        """Returns the uid the token belongs to."""
        raise NotImplementedError


class DocumentAuthProvider(AuthProvider):
    """
    Auth provider kept in the document store itself.

    Accounts are keyed by lower-cased email and carry the uid and password
    hash; sessions are keyed by a random session id embedded in the JWT, so
    signing out is deleting the session document.
    """

    def __init__(self, store: DocumentStore, jwt_handler: JWT):
        self.store = store
        self.jwt = jwt_handler

    @staticmethod
    def _email_key(email: str) -> str:
        return email.strip().lower()

    async def sign_in(self, email, password):
        account = await self.store.get(ACCOUNTS, self._email_key(email))
        if not account or not PasswordHandler.verify(password, account.data["passwordHash"]):
            raise AuthProviderError("Invalid email or password")

        session_id = new_key()
        uid = account.data["uid"]
        await self.store.set(SESSIONS, session_id, {"uid": uid, "createdAt": now_ms()})
        return AuthSession(uid=uid, token=self.jwt.encode(uid, session_id))

    async def create_account(self, email, password):
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthProviderError(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")

        key = self._email_key(email)
        if await self.store.get(ACCOUNTS, key):
            raise AuthProviderError("Email already in use")

        uid = new_key()
        await self.store.set(ACCOUNTS, key, {
            "uid": uid,
            "email": key,
            "passwordHash": PasswordHandler.hash(password),
            "createdAt": now_ms(),
        })
        logger.info(f"Account created for {key}", extra={'user': uid})
        return uid

    def _claims(self, token: str) -> dict:
        try:
            claims = self.jwt.decode(token)
        except JWTError:
            raise AuthProviderError("Invalid session token")
        if not claims.get("sub") or not claims.get("sid"):
            raise AuthProviderError("Invalid session token")
        return claims

    async def sign_out(self, token):
        claims = self._claims(token)
        await self.store.delete(SESSIONS, claims["sid"])

    async def verify_session(self, token):
        claims = self._claims(token)
        session = await self.store.get(SESSIONS, claims["sid"])
        if not session or session.data.get("uid") != claims["sub"]:
            raise AuthProviderError("Session expired or revoked")
        return claims["sub"]

    async def delete_account(self, uid):
        accounts = await self.store.get_all(ACCOUNTS)
        matches = [account for account in accounts if account.data.get("uid") == uid]
        if not matches:
            raise AuthProviderError("No account exists for this user")
        for account in matches:
            await self.store.delete(ACCOUNTS, account.key)

        for session in await self.store.get_all(SESSIONS):
            if session.data.get("uid") == uid:
                await self.store.delete(SESSIONS, session.key)
