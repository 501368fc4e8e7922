from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt


class JWT:
    """Signs and reads session tokens. ``sub`` is the uid, ``sid`` the session key."""

    def __init__(self, secret_key: str, algorithm: str, expire_minutes: int):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def encode(self, subject: str, session_id: str) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
        to_encode = {"sub": subject, "sid": session_id, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        """Returns the claims; raises ``JWTError`` on a bad or expired token."""
        return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])


__all__ = ["JWT", "JWTError"]
