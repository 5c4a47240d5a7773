"""HS256 JWT session tokens carried in the session cookie."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from app.application.interfaces import SessionTokenCodec

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtSessionCodec(SessionTokenCodec):
    """Issues and verifies signed tokens whose ``sub`` is the user id."""

    def __init__(self, secret: str, expires_hours: int = 24 * 7):
        self._secret = secret
        self._expires = timedelta(hours=expires_hours)

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": user_id, "iat": now, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> str | None:
        """Return the user id, or None for an expired, tampered or malformed token."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as exc:
            logger.debug("Rejected session token: %s", exc)
            return None
        subject = payload.get("sub")
        return subject if isinstance(subject, str) and subject else None
