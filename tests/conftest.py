from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from components.product_catalog import CatalogItem, load_catalog
from components.profile_builder import PreferenceProfile
from config import DEFAULT_SCORING_CONFIG

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def make_item():
    """Factory for eligible catalog items; every item gets its own brand unless overridden."""

    def _make(item_id: str, category: str = "apparel", price: float = 1000.0, **overrides) -> CatalogItem:
        fields = {
            "name": f"Item {item_id}",
            "brand": f"Brand {item_id}",
            "in_stock": True,
            "stock_qty": 5,
        }
        fields.update(overrides)
        return CatalogItem(id=item_id, category=category, price=price, **fields)

    return _make


@pytest.fixture
def no_jitter():
    return DEFAULT_SCORING_CONFIG.without_jitter()


@pytest.fixture
def plain_profile():
    """Personal profile whose style/occasion keywords never hit untagged items."""
    return PreferenceProfile(style="minimalist", occasion="vacation", budget=5000.0, color_mood="pastels")


@pytest.fixture
def bundled_catalog():
    items, path = load_catalog(PROJECT_ROOT, override=PROJECT_ROOT / "data" / "products.json")
    return items
