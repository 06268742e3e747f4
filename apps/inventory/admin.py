# ==========================================
# apps/inventory/admin.py
# ==========================================

from django.contrib import admin
from .models import StockTransaction


@admin.register(StockTransaction)
class StockTransactionAdmin(admin.ModelAdmin):
    """
    Read-only admin interface for the transaction ledger.

    Ledger rows are written by InventoryService only and are never
    edited or removed.
    """

    list_display = [
        'id',
        'type',
        'sweet',
        'user',
        'quantity',
        'total_price',
        'created_at',
    ]

    list_filter = [
        'type',
        'created_at',
    ]

    search_fields = [
        'sweet__name',
        'user__username',
    ]

    date_hierarchy = 'created_at'
    list_select_related = ['sweet', 'user']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
