"""
Inventory Services Module
=========================

Stock movements for the sweets catalog. ``InventoryService`` is the only code
that changes ``Sweet.quantity`` after a sweet is created, and it always does so
together with appending a ``StockTransaction`` ledger row.

Classes:
    InventoryService: Purchase and restock with atomic ledger append.

Example:
    Buying three sweets::

        from apps.inventory.services import InventoryService

        entry = InventoryService.purchase(
            user_id=request.user.id,
            sweet_id=sweet.id,
            quantity=3,
        )
        entry.total_price  # Decimal('30.00') for a 10.00 sweet
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from django.db import DataError, IntegrityError, transaction
from django.db.models import F, QuerySet

from apps.sweets.models import Sweet, MAX_STOCK_QUANTITY
from apps.sweets.services import SweetNotFoundError
from .exceptions import InvalidQuantityError, InsufficientStockError
from .models import StockTransaction, TransactionType

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
# Largest value a DecimalField(max_digits=10, decimal_places=2) can hold
MAX_TOTAL_PRICE = Decimal("99999999.99")


class InventoryService:
    """
    Service for stock movements with an auditable ledger.

    Every operation runs inside ``transaction.atomic`` and follows the same
    sequence for a single sweet:

        1. Validate the requested quantity.
        2. Lock the sweet row (``select_for_update``).
        3. Check the business rule against the locked quantity.
        4. Apply the change with a conditional ``UPDATE`` on ``F('quantity')``.
        5. Append the ledger row.

    Any exception rolls back both writes, so a stock change without its
    ledger row (or the reverse) is never committed. Operations on different
    sweets lock different rows and do not wait for each other.

    Methods:
        purchase: Decrease stock and record a sale.
        restock: Increase stock and record the delivery.
        list_transactions: Ledger rows, newest first.
    """

    @staticmethod
    def _validate_quantity(quantity):
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError("Quantity must be a whole number")
        if quantity < 1:
            raise InvalidQuantityError("Quantity must be at least 1")
        if quantity > MAX_STOCK_QUANTITY:
            raise InvalidQuantityError(f"Quantity must be at most {MAX_STOCK_QUANTITY}")

    @staticmethod
    def _lock_sweet(sweet_id):
        try:
            return (
                Sweet.objects
                .select_for_update()
                .get(id=sweet_id, is_active=True)
            )
        except Sweet.DoesNotExist:
            raise SweetNotFoundError(f"Sweet {sweet_id} not found")

    @staticmethod
    @transaction.atomic
    def purchase(*, user_id, sweet_id, quantity=1):
        """
        Purchase sweets: decrement stock and record the sale.

        Args:
            user_id (int): Buyer's user ID.
            sweet_id (int): Sweet to buy.
            quantity (int, optional): Number of items. Defaults to 1.

        Returns:
            StockTransaction: The ``purchase`` ledger row, with
            ``total_price = price * quantity`` rounded to 2 places.

        Raises:
            InvalidQuantityError: If quantity is not an integer >= 1, or the
                order total exceeds MAX_TOTAL_PRICE.
            SweetNotFoundError: If the sweet doesn't exist.
            InsufficientStockError: If stock is lower than quantity.
        """
        InventoryService._validate_quantity(quantity)
        sweet = InventoryService._lock_sweet(sweet_id)

        if sweet.quantity < quantity:
            logger.warning(
                "Purchase of %s x sweet %s by user %s rejected: %s in stock",
                quantity, sweet_id, user_id, sweet.quantity
            )
            raise InsufficientStockError(
                f"Insufficient stock: {sweet.quantity} available, {quantity} requested"
            )

        total_price = (sweet.price * quantity).quantize(CENT, rounding=ROUND_HALF_UP)
        if total_price > MAX_TOTAL_PRICE:
            raise InvalidQuantityError(
                f"Order total {total_price} exceeds the maximum of {MAX_TOTAL_PRICE}"
            )

        # Compare-and-swap guard for backends where the row lock is a no-op
        updated = (
            Sweet.objects
            .filter(id=sweet.id, quantity__gte=quantity)
            .update(quantity=F('quantity') - quantity)
        )
        if not updated:
            raise InsufficientStockError("Insufficient stock")

        entry = StockTransaction.objects.create(
            user_id=user_id,
            sweet_id=sweet.id,
            quantity=quantity,
            total_price=total_price,
            type=TransactionType.PURCHASE,
        )

        logger.info(
            "User %s purchased %s x sweet %s for %s (transaction %s)",
            user_id, quantity, sweet.id, total_price, entry.id
        )
        return entry

    @staticmethod
    @transaction.atomic
    def restock(*, user_id, sweet_id, quantity):
        """
        Restock a sweet: increment stock and record the delivery.

        Args:
            user_id (int): Admin performing the restock.
            sweet_id (int): Sweet to restock.
            quantity (int): Number of items added.

        Returns:
            Sweet: The sweet with its updated quantity.

        Raises:
            InvalidQuantityError: If quantity is not an integer >= 1, or the
                new stock level would exceed MAX_STOCK_QUANTITY.
            SweetNotFoundError: If the sweet doesn't exist.
        """
        InventoryService._validate_quantity(quantity)
        sweet = InventoryService._lock_sweet(sweet_id)

        if sweet.quantity + quantity > MAX_STOCK_QUANTITY:
            raise InvalidQuantityError(
                f"Restock would raise stock above {MAX_STOCK_QUANTITY}"
            )

        try:
            Sweet.objects.filter(id=sweet.id).update(quantity=F('quantity') + quantity)
        except (DataError, IntegrityError) as e:
            logger.warning("Restock of sweet %s by %s rejected: %s", sweet.id, quantity, e)
            raise InvalidQuantityError("Restock would exceed the stock limit")

        entry = StockTransaction.objects.create(
            user_id=user_id,
            sweet_id=sweet.id,
            quantity=quantity,
            total_price=Decimal('0.00'),
            type=TransactionType.RESTOCK,
        )

        sweet.refresh_from_db()
        logger.info(
            "User %s restocked sweet %s by %s, now %s (transaction %s)",
            user_id, sweet.id, quantity, sweet.quantity, entry.id
        )
        return sweet

    @staticmethod
    def list_transactions() -> QuerySet[StockTransaction]:
        """Return all ledger rows, newest first."""
        return StockTransaction.objects.select_related('user', 'sweet').order_by('-created_at', '-id')
