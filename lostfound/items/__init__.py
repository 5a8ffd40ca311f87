"""Item record models and the default category registry."""

from lostfound.items.models import (
    FOUND,
    ITEM_CATEGORIES,
    LOST,
    Category,
    Item,
    MatchableStatus,
    category_label,
    opposite_status,
)

__all__ = [
    "FOUND",
    "ITEM_CATEGORIES",
    "LOST",
    "Category",
    "Item",
    "MatchableStatus",
    "category_label",
    "opposite_status",
]
