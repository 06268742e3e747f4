from decimal import Decimal
from rest_framework import serializers
from .models import Sweet, MAX_STOCK_QUANTITY


# =============================================================================
# Input Serializers
# =============================================================================

class SweetSearchSerializer(serializers.Serializer):
    """
    Validate query parameters for sweet search.

    Query Parameters:
        name (str): Case-insensitive substring of the name
        category (str): Exact category
        minPrice (decimal): Inclusive lower price bound
        maxPrice (decimal): Inclusive upper price bound
    """

    name = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    minPrice = serializers.DecimalField(
        source='min_price',
        max_digits=10,
        decimal_places=2,
        required=False
    )
    maxPrice = serializers.DecimalField(
        source='max_price',
        max_digits=10,
        decimal_places=2,
        required=False
    )


# =============================================================================
# Output Serializers
# =============================================================================

class SweetSerializer(serializers.ModelSerializer):
    """Main serializer for sweets."""

    imageUrl = serializers.CharField(
        source='image_url',
        max_length=500,
        allow_null=True,
        allow_blank=True,
        required=False
    )

    class Meta:
        model = Sweet
        fields = [
            'id',
            'name',
            'category',
            'price',
            'quantity',
            'description',
            'imageUrl',
        ]
        read_only_fields = ['id']


class SweetCreateSerializer(SweetSerializer):
    """Serializer for creating sweets."""

    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00')
    )
    quantity = serializers.IntegerField(
        min_value=0,
        max_value=MAX_STOCK_QUANTITY,
        default=0
    )

    class Meta(SweetSerializer.Meta):
        extra_kwargs = {
            'description': {'required': False},
        }


class SweetUpdateSerializer(SweetSerializer):
    """
    Serializer for partial sweet updates.

    Stock levels change through purchase and restock only.
    """

    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False
    )

    class Meta(SweetSerializer.Meta):
        fields = [
            'name',
            'category',
            'price',
            'description',
            'imageUrl',
        ]

    def validate(self, attrs):
        if 'quantity' in self.initial_data:
            raise serializers.ValidationError({
                'quantity': 'Stock can only be changed by purchase or restock'
            })
        return attrs
