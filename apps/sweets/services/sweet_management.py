"""Sweet CRUD operations service."""

import logging

from django.db import transaction
from typing import Optional, Dict, Any
from decimal import Decimal

from ..models import Sweet
from .exceptions import SweetNotFoundError

logger = logging.getLogger(__name__)

# Stock is only changed by purchases and restocks after creation
UPDATABLE_FIELDS = ['name', 'category', 'price', 'description', 'image_url']


@transaction.atomic
def create_sweet(
    *,
    name: str,
    category: str,
    price: Decimal,
    quantity: int = 0,
    description: Optional[str] = None,
    image_url: Optional[str] = None
) -> Sweet:
    """
    Create a new sweet.

    Args:
        name: Display name
        category: Category label
        price: Unit price (non-negative, 2 decimal places)
        quantity: Initial stock level
        description: Optional description
        image_url: Optional image URL

    Returns:
        Created Sweet instance
    """
    sweet = Sweet.objects.create(
        name=name,
        category=category,
        price=price,
        quantity=quantity,
        description=description,
        image_url=image_url,
    )

    logger.info("Created sweet %s (id=%s, quantity=%s)", sweet.name, sweet.id, sweet.quantity)
    return sweet


@transaction.atomic
def update_sweet(
    *,
    sweet_id: int,
    data: Dict[str, Any]
) -> Sweet:
    """
    Partially update an existing sweet.

    Only the supplied catalog fields are written, so a concurrent
    purchase's stock change is never overwritten.

    Args:
        sweet_id: Sweet ID
        data: Fields to update

    Returns:
        Updated Sweet instance

    Raises:
        SweetNotFoundError: If sweet doesn't exist
    """
    try:
        sweet = (
            Sweet.objects
            .select_for_update()
            .get(id=sweet_id, is_active=True)
        )
    except Sweet.DoesNotExist:
        raise SweetNotFoundError(f"Sweet {sweet_id} not found")

    changed = []
    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(sweet, field, value)
            changed.append(field)

    if changed:
        sweet.save(update_fields=changed + ['updated_at'])
        logger.info("Updated sweet %s fields: %s", sweet.id, ', '.join(changed))

    return sweet


@transaction.atomic
def delete_sweet(*, sweet_id: int) -> None:
    """
    Soft delete a sweet (set is_active=False).

    The ledger keeps referencing the row, so history stays intact.

    Args:
        sweet_id: Sweet ID

    Raises:
        SweetNotFoundError: If sweet doesn't exist
    """
    try:
        sweet = (
            Sweet.objects
            .select_for_update()
            .get(id=sweet_id, is_active=True)
        )
    except Sweet.DoesNotExist:
        raise SweetNotFoundError(f"Sweet {sweet_id} not found")

    sweet.is_active = False
    sweet.save(update_fields=['is_active', 'updated_at'])
    logger.info("Deleted sweet %s", sweet_id)


def get_sweet_by_id(*, sweet_id: int) -> Sweet:
    """
    Get active sweet by ID.

    Raises:
        SweetNotFoundError: If sweet doesn't exist
    """
    try:
        return Sweet.objects.get(id=sweet_id, is_active=True)
    except Sweet.DoesNotExist:
        raise SweetNotFoundError(f"Sweet {sweet_id} not found")
