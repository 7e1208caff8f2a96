"""
JWT access token creation and verification.

Tokens carry the username as ``sub`` and are signed with a symmetric key
from configuration (``JWT_SECRET_KEY`` or ``JWT_SECRET_KEY_FILE``).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from tracker.config import Settings, settings

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Issues and decodes signed, time-bounded bearer tokens."""

    def __init__(self, secret_key: Optional[str], algorithm: str = "HS256", expire_minutes: int = 10080):
        if not secret_key:
            raise RuntimeError("JWT signing key is not configured")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "TokenIssuer":
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expire_minutes=config.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token for ``subject``."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)

        now = datetime.now(timezone.utc)
        to_encode = {
            "sub": subject,
            "iat": now,
            "exp": now + expires_delta,
        }
        token = jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)
        logger.info("JWT token generated for username: %s.", subject)
        return token

    def decode(self, token: str) -> Optional[str]:
        """Decode and validate a JWT token. Returns the subject if valid.

        Issuer and audience are not checked; no token we issue carries them.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"verify_aud": False, "require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.info("Rejected bearer token: %s", e)
            return None
        return payload.get("sub")
