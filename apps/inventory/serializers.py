from rest_framework import serializers
from apps.sweets.models import MAX_STOCK_QUANTITY
from .models import StockTransaction


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseInputSerializer(serializers.Serializer):
    """
    Validate input for purchasing a sweet.

    Fields:
        quantity (int): Items to buy. Defaults to 1 when omitted; zero and
            negative values are rejected by InventoryService.
    """

    quantity = serializers.IntegerField(
        max_value=MAX_STOCK_QUANTITY,
        required=False,
        default=1
    )


class RestockInputSerializer(serializers.Serializer):
    """
    Validate input for restocking a sweet.

    Fields:
        quantity (int): Items to add (required, must be positive).
    """

    quantity = serializers.IntegerField(max_value=MAX_STOCK_QUANTITY)


# =============================================================================
# Output Serializers
# =============================================================================

class StockTransactionSerializer(serializers.ModelSerializer):
    """Serializer for ledger rows."""

    userId = serializers.IntegerField(source='user_id', read_only=True)
    sweetId = serializers.IntegerField(source='sweet_id', read_only=True)
    totalPrice = serializers.DecimalField(
        source='total_price',
        max_digits=10,
        decimal_places=2,
        read_only=True
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = StockTransaction
        fields = [
            'id',
            'userId',
            'sweetId',
            'quantity',
            'totalPrice',
            'type',
            'createdAt',
        ]
        read_only_fields = fields


class StockTransactionListSerializer(StockTransactionSerializer):
    """Ledger rows with names for the admin history view."""

    username = serializers.CharField(source='user.username', read_only=True)
    sweetName = serializers.CharField(source='sweet.name', read_only=True)

    class Meta(StockTransactionSerializer.Meta):
        fields = StockTransactionSerializer.Meta.fields + [
            'username',
            'sweetName',
        ]
        read_only_fields = fields
