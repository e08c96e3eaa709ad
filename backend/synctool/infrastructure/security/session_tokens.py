"""JWT session tokens for admins, signed with python-jose."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from synctool.application.interfaces import SessionTokenCodec
from synctool.domain.exceptions import UnauthenticatedError


class JoseSessionTokenCodec(SessionTokenCodec):
    """Encodes ``{"adminId": ..., "exp": ...}`` as an HS256 (by default) JWT."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        self._secret = secret
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def encode(self, admin_id: int) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "adminId": admin_id,
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as err:
            raise UnauthenticatedError("Invalid or expired token") from err

        admin_id = payload.get("adminId")
        if not isinstance(admin_id, int) or isinstance(admin_id, bool):
            raise UnauthenticatedError("Invalid or expired token")
        return admin_id
