# ==========================================
# apps/sweets/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

# Upper bound of PositiveIntegerField on every supported backend
MAX_STOCK_QUANTITY = 2147483647


class Sweet(models.Model):
    """Catalog item with price and stock level."""

    name = models.CharField(max_length=200, db_index=True)
    category = models.CharField(max_length=100, db_index=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Changed only by InventoryService after creation
    quantity = models.PositiveIntegerField(default=0)
    description = models.TextField(null=True, blank=True)
    image_url = models.CharField(max_length=500, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sweets'
        ordering = ['name', 'id']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name='sweet_quantity_non_negative',
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name='sweet_price_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.category})"

    @property
    def in_stock(self):
        return self.quantity > 0
