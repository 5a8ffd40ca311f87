"""Item records supplied to the matcher by the item store."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MatchableStatus = Literal["lost", "found"]

LOST: MatchableStatus = "lost"
FOUND: MatchableStatus = "found"


class Category(BaseModel):
    """An entry of the category registry."""

    id: str = Field(..., description="Category identifier stored on items")
    label: str = Field(..., description="Human readable label")


# Default registry; the matcher only ever compares identifiers for equality.
ITEM_CATEGORIES: list[Category] = [
    Category(id="electronics", label="Electronics"),
    Category(id="stationery", label="Stationery"),
    Category(id="clothing", label="Clothing"),
    Category(id="accessories", label="Accessories"),
    Category(id="documents", label="Documents"),
    Category(id="other", label="Other"),
]


def category_label(category_id: str | None) -> str | None:
    """Look up the label for a category id, falling back to the id itself."""
    if not category_id:
        return None
    for category in ITEM_CATEGORIES:
        if category.id == category_id:
            return category.label
    return category_id


class Item(BaseModel):
    """A lost or found item report.

    Extra fields coming from the item store (``categoryName``, ``userId``,
    ``imageUrl``...) are kept so they round-trip back to the caller inside
    each match.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Stable identifier assigned by the item store")
    title: str | None = Field(default=None, description="Short item title")
    description: str | None = Field(default=None, description="Free-text description")
    category: str | None = Field(default=None, description="Category identifier")
    location: str | None = Field(default=None, description="Where it was lost/found")
    date: dt.datetime | dt.date | str | None = Field(
        default=None,
        description="Day the item was lost/found; unparseable strings are kept as-is",
    )
    status: str = Field(..., description="One of lost, found, claimed, returned")


def opposite_status(status: str) -> MatchableStatus:
    """Return the status a candidate must have to pair with ``status``.

    Raises:
        ValueError: If ``status`` is neither ``lost`` nor ``found``
    """
    if status == LOST:
        return FOUND
    if status == FOUND:
        return LOST
    raise ValueError(f"Target type must be 'lost' or 'found', got {status!r}")
