import sys
from pathlib import Path
import pytest

# Ensure project root is on sys.path so `import lostfound` works when running pytest from root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lostfound.items.models import Item  # noqa: E402


@pytest.fixture
def make_item():
    """Build an item, overriding any field of a complete lost backpack report."""

    def _make(**overrides) -> Item:
        data = {
            "id": "item-1",
            "title": "Blue Backpack",
            "description": "Navy blue backpack with a laptop sleeve and keychain",
            "category": "accessories",
            "location": "Library",
            "date": "2024-01-10",
            "status": "lost",
        }
        data.update(overrides)
        return Item(**data)

    return _make


@pytest.fixture
def lost_backpack(make_item):
    """A lost backpack report."""
    return make_item(id="lost-1")


@pytest.fixture
def found_backpack(make_item):
    """A found report with the same fields as ``lost_backpack``."""
    return make_item(id="found-1", status="found")


@pytest.fixture
def mixed_pool(make_item):
    """Pool holding every status, as loaded from the item store."""
    return [
        make_item(id="found-1", status="found"),
        make_item(
            id="found-2",
            status="found",
            title="Black Backpack",
            description="Black backpack, laptop inside",
            location="Main Library entrance",
            date="2024-01-12",
        ),
        make_item(
            id="found-3",
            status="found",
            title="Smart Watch",
            description="Wrist watch with a metal strap",
            category="electronics",
            location="Gym locker room",
            date="2024-03-01",
        ),
        make_item(id="lost-2", status="lost"),
        make_item(id="claimed-1", status="claimed"),
        make_item(id="returned-1", status="returned"),
    ]
