"""Role guard: decide whether an identity may use a role-restricted page or endpoint.

The decision is made from the caller's server-side profile on every request,
including every mutating call, so a client cannot elevate itself by editing
local state or token claims.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.session import get_db
from merchflow.exceptions import AccessDeniedException, UnauthorizedException
from merchflow.models.enums import UserRole
from merchflow.models.profile import Profile
from merchflow.modules.auth.auth import AuthenticatedIdentity, get_current_identity
from merchflow.modules.auth.constants import (
    ACCESS_DENIED_MESSAGE,
    LOGIN_ROUTE,
    PAGE_ROLES,
)
from merchflow.modules.auth.service import ProfileService

logger = logging.getLogger(__name__)


class AccessOutcome(str, enum.Enum):
    AUTHORIZED = "authorized"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AccessDecision:
    outcome: AccessOutcome
    redirect_to: str | None = None
    message: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.AUTHORIZED


def evaluate_access(
    identity: AuthenticatedIdentity | None,
    profile: Profile | None,
    allowed_roles: Iterable[UserRole],
) -> AccessDecision:
    """Pure guard decision.

    No identity sends the caller to the login route.  An identity without a
    profile, or whose profile role is not allowed, gets "Access denied" and
    is also sent to the login route.
    """
    if identity is None:
        return AccessDecision(
            outcome=AccessOutcome.UNAUTHENTICATED,
            redirect_to=LOGIN_ROUTE,
            message="Authentication required",
        )
    if profile is None or profile.role not in set(allowed_roles):
        return AccessDecision(
            outcome=AccessOutcome.FORBIDDEN,
            redirect_to=LOGIN_ROUTE,
            message=ACCESS_DENIED_MESSAGE,
        )
    return AccessDecision(outcome=AccessOutcome.AUTHORIZED)


def match_page(path: str) -> frozenset[UserRole] | None:
    """Return the roles allowed on *path*, or None when it is not a restricted page."""
    segments = [s for s in path.strip().split("/") if s]
    for pattern, roles in PAGE_ROLES.items():
        pattern_segments = [s for s in pattern.split("/") if s]
        if len(pattern_segments) != len(segments):
            continue
        if all(
            p.startswith(":") or p == s
            for p, s in zip(pattern_segments, segments)
        ):
            return roles
    return None


def require_role(*roles: UserRole):
    """Factory returning a dependency that resolves the caller's profile and enforces *roles*.

    The dependency yields the caller's :class:`Profile` so handlers can scope
    queries to it.
    """
    allowed = frozenset(roles)

    async def _check(
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        db: AsyncSession = Depends(get_db),
    ) -> Profile:
        profile = await ProfileService(db).get_profile(identity.id)
        decision = evaluate_access(identity, profile, allowed)
        if decision.outcome is AccessOutcome.UNAUTHENTICATED:
            raise UnauthorizedException(decision.message, redirect_to=decision.redirect_to)
        if decision.outcome is AccessOutcome.FORBIDDEN:
            logger.warning(
                "Access denied for identity %s (role=%s, required=%s)",
                identity.id,
                profile.role.value if profile else None,
                sorted(r.value for r in allowed),
            )
            raise AccessDeniedException(decision.message, redirect_to=decision.redirect_to)
        return profile

    return _check


require_dealer = require_role(UserRole.DEALER)
require_vendor = require_role(UserRole.VENDOR)
require_admin = require_role(UserRole.ADMIN)
