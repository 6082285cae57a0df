"""JWT identity resolution for FastAPI.

Tokens are issued by the external identity provider; this module only
validates them and extracts the subject.  Roles are never read from the
token: they come from the ``profiles`` table (see ``guard``).
"""

import logging
import uuid
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from merchflow.config import settings
from merchflow.exceptions import UnauthorizedException
from merchflow.modules.auth.constants import LOGIN_ROUTE

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AuthenticatedIdentity:
    """The identity-provider subject behind the current request."""

    id: uuid.UUID
    email: str | None = None


def _decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises UnauthorizedException on failure."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except JWTError as exc:
        logger.warning("JWT validation failed: %s", exc)
        raise UnauthorizedException(
            "Invalid or expired token", redirect_to=LOGIN_ROUTE
        ) from exc


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthenticatedIdentity:
    """FastAPI dependency returning the authenticated identity or raising 401."""
    if credentials is None:
        raise UnauthorizedException("Authentication required", redirect_to=LOGIN_ROUTE)

    payload = _decode_token(credentials.credentials)

    try:
        identity = AuthenticatedIdentity(
            id=uuid.UUID(payload["sub"]),
            email=payload.get("email"),
        )
    except (KeyError, ValueError) as exc:
        raise UnauthorizedException(
            "Token is missing required claims", redirect_to=LOGIN_ROUTE
        ) from exc

    return identity


async def get_optional_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthenticatedIdentity | None:
    """Like get_current_identity but returns None for unauthenticated requests."""
    if credentials is None:
        return None

    try:
        return await get_current_identity(credentials)
    except UnauthorizedException:
        return None
