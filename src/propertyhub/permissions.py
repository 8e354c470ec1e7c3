# permissions.py
from rest_framework.permissions import BasePermission

from .models import Role


class IsAuthenticatedUser(BasePermission):
    """Any authenticated account, whatever its role."""

    message = "Authentication credentials were not provided."

    def has_permission(self, request, view):
        return bool(getattr(request, "user_id", None))


class IsAgentOrAdmin(BasePermission):
    """Roles allowed to publish and edit listings."""

    message = "Only agents and admins can manage listings."

    def has_permission(self, request, view):
        if not getattr(request, "user_id", None):
            return False
        return getattr(request, "role", None) in Role.LISTING_ROLES


class IsAdminRole(BasePermission):
    message = "Admin access required."

    def has_permission(self, request, view):
        if not getattr(request, "user_id", None):
            return False
        return getattr(request, "role", None) == Role.ADMIN
