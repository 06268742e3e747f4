"""Sweet listing, search and filtering service."""

from django.db.models import QuerySet
from django.db.models.functions import Trim
from typing import Optional
from decimal import Decimal

from ..models import Sweet


def list_sweets() -> QuerySet[Sweet]:
    """Return all active sweets ordered by name."""
    return Sweet.objects.filter(is_active=True).order_by('name', 'id')


def search_sweets(
    *,
    name: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None
) -> QuerySet[Sweet]:
    """
    Search and filter sweets.

    All filters are optional and combined with AND. Empty strings are
    treated as absent, so calling without filters equals list_sweets().

    Args:
        name: Case-insensitive substring of the name
        category: Exact category
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound

    Returns:
        Filtered QuerySet of Sweet ordered by name
    """
    queryset = list_sweets()

    if name:
        queryset = queryset.filter(name__icontains=name)

    if category:
        queryset = queryset.filter(category=category)

    if min_price is not None:
        queryset = queryset.filter(price__gte=min_price)

    if max_price is not None:
        queryset = queryset.filter(price__lte=max_price)

    return queryset


def get_all_categories() -> list[str]:
    """
    Get list of all distinct categories.

    Returns:
        Sorted list of trimmed, non-empty category names
    """
    categories = (
        Sweet.objects
        .filter(is_active=True)
        .annotate(category_trimmed=Trim('category'))
        .exclude(category_trimmed='')
        .values_list('category_trimmed', flat=True)
        .distinct()
        .order_by('category_trimmed')
    )

    return list(categories)
