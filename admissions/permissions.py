"""
Role based permission classes.
"""
from rest_framework.permissions import BasePermission

ADMIN_ROLES = {"admin"}
INTAKE_ROLES = {"admin", "staff"}


class IsAdminRole(BasePermission):
    """Allow access only to users with the admin role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "role", None) in ADMIN_ROLES)


class IsStaffOrAdmin(BasePermission):
    """Allow any intake role (admin or staff)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "role", None) in INTAKE_ROLES)
