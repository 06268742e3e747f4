# ==========================================
# apps/inventory/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator


class TransactionType(models.TextChoices):
    PURCHASE = 'purchase', 'Purchase'
    RESTOCK = 'restock', 'Restock'


class StockTransaction(models.Model):
    """
    Ledger entry for a stock movement.

    Rows are append-only: one is written per successful purchase or restock,
    in the same database transaction as the stock change.
    """

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    sweet = models.ForeignKey(
        'sweets.Sweet',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    # Zero for restocks
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    type = models.CharField(max_length=10, choices=TransactionType.choices)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'transactions'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['sweet', 'created_at'], name='transactions_sweet_created_idx'),
            models.Index(fields=['user', 'created_at'], name='transactions_user_created_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name='transaction_quantity_positive',
            ),
        ]

    def __str__(self):
        return f"{self.get_type_display()} of {self.quantity} x sweet {self.sweet_id} by user {self.user_id}"
