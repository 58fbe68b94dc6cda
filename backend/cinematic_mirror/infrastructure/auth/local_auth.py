"""
Local JWT authentication provider.

Accepts HS256 tokens carrying the `userId`, `email` and `nickname` claims.
"""

from __future__ import annotations

from jose import JWTError

from cinematic_mirror.core.config import Settings
from cinematic_mirror.core.exceptions import AuthenticationError
from cinematic_mirror.core.security import decode_access_token
from cinematic_mirror.interfaces.auth_provider import IAuthProvider, User


class LocalAuthProvider(IAuthProvider):
    """Local auth provider with HMAC JWT validation."""

    def __init__(self, settings: Settings):
        if not settings.JWT_SECRET:
            raise ValueError("JWT_SECRET must be set for local auth")
        self._settings = settings

    async def verify_token(self, token: str) -> User:
        try:
            claims = decode_access_token(token, self._settings)
        except JWTError as exc:
            raise AuthenticationError("Invalid or expired token") from exc

        user_id = claims.get("userId")
        if not user_id:
            raise AuthenticationError("Token is missing userId")
        return User(
            id=str(user_id),
            email=str(claims.get("email") or ""),
            display_name=str(claims.get("nickname") or ""),
        )

    def is_enabled(self) -> bool:
        return True
