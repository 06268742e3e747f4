# ==========================================
# apps/sweets/admin.py
# ==========================================

from django.contrib import admin
from .models import Sweet


@admin.register(Sweet)
class SweetAdmin(admin.ModelAdmin):
    """
    Admin interface for the sweets catalog.

    Stock is read-only here. Purchases and restocks change it together
    with a ledger row.
    """

    list_display = [
        'name',
        'category',
        'price',
        'quantity',
        'is_active',
        'updated_at',
    ]

    list_filter = [
        'category',
        'is_active',
    ]

    search_fields = [
        'name',
        'category',
    ]

    readonly_fields = ['quantity', 'created_at', 'updated_at']
