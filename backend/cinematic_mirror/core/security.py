"""
Security helpers for JWT authentication.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from jose import jwt

from cinematic_mirror.core.config import Settings
from cinematic_mirror.utils.datetime_utils import now_utc

JWT_ALGORITHM = "HS256"


def create_access_token(
    user_id: str,
    settings: Settings,
    email: str = "",
    nickname: str = "",
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed JWT carrying the userId/email/nickname claims."""
    now = now_utc()
    expires = now + timedelta(minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload = {
        "userId": user_id,
        "email": email,
        "nickname": nickname,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict[str, object]:
    """Decode and verify a JWT. Raises jose.JWTError on failure."""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[JWT_ALGORITHM])
