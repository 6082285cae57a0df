"""Pydantic v2 schemas for profile and page-access endpoints."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict

from merchflow.models.enums import UserRole
from merchflow.modules.auth.guard import AccessOutcome


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    role: UserRole
    full_name: str | None = None
    company_name: str | None = None


class SessionResponse(BaseModel):
    profile: ProfileResponse
    home_route: str


class PageAccessResponse(BaseModel):
    page: str
    outcome: AccessOutcome
    redirect_to: str | None = None
    message: str | None = None
