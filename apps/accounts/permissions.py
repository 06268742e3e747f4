from rest_framework import permissions


class IsAdminRole(permissions.BasePermission):
    """
    Permission: User must have the admin role.

    Use after IsAuthenticated so that missing or invalid tokens are
    reported by the authentication layer (401/403) before the role check.
    """

    message = 'Admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
