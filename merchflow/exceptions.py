"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.  ``redirect_to`` is
    the client route the caller should be sent to, when there is one.
    """

    code: str = "APP_ERROR"
    status_code: int = 500
    redirect_to: str | None = None

    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
        redirect_to: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []
        if redirect_to is not None:
            self.redirect_to = redirect_to


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ForbiddenException(AppException):
    code = "FORBIDDEN"
    status_code = 403


class AccessDeniedException(ForbiddenException):
    """Authenticated, but the profile's role may not use the requested page."""

    code = "ACCESS_DENIED"


class UnauthorizedException(AppException):
    code = "UNAUTHORIZED"
    status_code = 401


class ValidationException(AppException):
    code = "VALIDATION_ERROR"
    status_code = 422


class BusinessRuleException(AppException):
    code = "BUSINESS_RULE_VIOLATION"
    status_code = 422


class InvalidTransitionException(BusinessRuleException):
    """Raised when an order status change is not in the transition table."""

    code = "INVALID_TRANSITION"
