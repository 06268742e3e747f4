# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Read-only admin interface for shop users.

    Roles are fixed at registration, so users can be browsed and
    searched but not edited here.
    """

    list_display = [
        'username',
        'role',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'created_at',
    ]

    search_fields = [
        'username',
    ]

    ordering = ['-created_at']
    fields = ['username', 'role', 'created_at', 'last_login']
    readonly_fields = fields

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
