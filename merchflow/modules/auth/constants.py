"""Client routes and the roles allowed on each role-restricted page."""

from merchflow.models.enums import UserRole

LOGIN_ROUTE = "/auth"

ACCESS_DENIED_MESSAGE = "Access denied"

# Landing dashboard per role
HOME_ROUTES: dict[UserRole, str] = {
    UserRole.DEALER: "/dealer",
    UserRole.VENDOR: "/vendor",
    UserRole.ADMIN: "/admin",
}

# Route pattern -> roles permitted to open it. ``:name`` segments match any value.
PAGE_ROLES: dict[str, frozenset[UserRole]] = {
    "/dealer": frozenset({UserRole.DEALER}),
    "/dealer/new-order": frozenset({UserRole.DEALER}),
    "/dealer/order/:productId": frozenset({UserRole.DEALER}),
    "/dealer/past-orders": frozenset({UserRole.DEALER}),
    "/vendor": frozenset({UserRole.VENDOR}),
    "/admin": frozenset({UserRole.ADMIN}),
}
