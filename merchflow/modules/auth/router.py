"""Session and page-gate endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.session import get_db
from merchflow.exceptions import NotFoundException
from merchflow.models.enums import UserRole
from merchflow.models.profile import Profile
from merchflow.modules.auth.auth import AuthenticatedIdentity, get_optional_identity
from merchflow.modules.auth.constants import HOME_ROUTES
from merchflow.modules.auth.guard import evaluate_access, match_page, require_role
from merchflow.modules.auth.schemas import (
    PageAccessResponse,
    ProfileResponse,
    SessionResponse,
)
from merchflow.modules.auth.service import ProfileService

router = APIRouter(prefix="/auth", tags=["auth"])

_any_role = require_role(*UserRole)


@router.get("/me", response_model=SessionResponse)
async def get_session(profile: Profile = Depends(_any_role)):
    """Current profile and the dashboard route it lands on."""
    return SessionResponse(
        profile=ProfileResponse.model_validate(profile),
        home_route=HOME_ROUTES[profile.role],
    )


@router.get("/access", response_model=PageAccessResponse)
async def check_page_access(
    page: str = Query(..., min_length=1),
    identity: AuthenticatedIdentity | None = Depends(get_optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Guard decision for a client page, evaluated before the page loads its data."""
    roles = match_page(page)
    if roles is None:
        raise NotFoundException(f"Unknown page '{page}'")

    profile = None
    if identity is not None:
        profile = await ProfileService(db).get_profile(identity.id)

    decision = evaluate_access(identity, profile, roles)
    return PageAccessResponse(
        page=page,
        outcome=decision.outcome,
        redirect_to=decision.redirect_to,
        message=decision.message,
    )
