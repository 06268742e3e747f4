"""
Domain exceptions for inventory app.

Exception Hierarchy:
    InventoryServiceError (base)
    ├── InvalidQuantityError
    └── InsufficientStockError

A missing sweet is reported with ``apps.sweets.services.SweetNotFoundError``.

Usage:
    from apps.inventory.exceptions import InsufficientStockError

    if sweet.quantity < quantity:
        raise InsufficientStockError(f"Only {sweet.quantity} left")
"""


class InventoryServiceError(Exception):
    """Base exception for inventory service errors."""
    pass


class InvalidQuantityError(InventoryServiceError):
    """Raised when a purchase or restock quantity is not a positive integer."""
    pass


class InsufficientStockError(InventoryServiceError):
    """Raised when a purchase would drive stock below zero."""
    pass
