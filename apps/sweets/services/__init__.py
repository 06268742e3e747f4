"""Services for sweets catalog business logic."""

from .exceptions import (
    SweetsServiceError,
    SweetNotFoundError,
)
from .sweet_management import (
    create_sweet,
    update_sweet,
    delete_sweet,
    get_sweet_by_id,
)
from .sweet_search import (
    list_sweets,
    search_sweets,
    get_all_categories,
)

__all__ = [
    # Exceptions
    'SweetsServiceError',
    'SweetNotFoundError',
    # Sweet Management
    'create_sweet',
    'update_sweet',
    'delete_sweet',
    'get_sweet_by_id',
    # Sweet Search
    'list_sweets',
    'search_sweets',
    'get_all_categories',
]
