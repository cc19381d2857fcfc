from rest_framework import permissions


class IsAdminManager(permissions.BasePermission):
    """Only managers flagged ``is_admin`` may pass."""

    message = 'Admin manager access required.'

    def has_permission(self, request, view):
        manager = request.user
        return bool(manager and manager.is_authenticated and manager.is_admin)
