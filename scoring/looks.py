"""Look and LookItem value objects plus their wire format."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from components.product_catalog import CatalogItem
from config import PLACEHOLDER_IMAGE, PRODUCT_URL_TEMPLATE


@dataclass(frozen=True)
class LookItem:
    product_id: str
    product_name: str
    brand: str
    category: str
    price: float
    image_url: str
    product_url: str
    styling_note: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "brand": self.brand,
            "category": self.category,
            "price": self.price,
            "image_url": self.image_url,
            "product_url": self.product_url,
            "styling_note": self.styling_note,
        }


@dataclass(frozen=True)
class Look:
    look_number: int
    name: str
    description: str
    items: Tuple[LookItem, ...]
    style_tip: str
    is_fallback: bool = False

    @property
    def total_price(self) -> float:
        return sum(item.price for item in self.items)

    @property
    def categories(self) -> set:
        return {item.category for item in self.items}

    @property
    def product_ids(self) -> Tuple[str, ...]:
        return tuple(item.product_id for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "look_number": self.look_number,
            "look_name": self.name,
            "look_description": self.description,
            "items": [item.to_dict() for item in self.items],
            "total_price": self.total_price,
            "style_tip": self.style_tip,
        }


def to_look_item(item: CatalogItem, styling_note: str) -> LookItem:
    return LookItem(
        product_id=item.id,
        product_name=item.name,
        brand=item.brand,
        category=item.category,
        price=item.price,
        image_url=item.primary_image or PLACEHOLDER_IMAGE,
        product_url=PRODUCT_URL_TEMPLATE.format(product_id=item.id),
        styling_note=styling_note,
    )


def meets_composition_floor(items: Iterable[LookItem]) -> bool:
    """At least two items spanning at least two categories."""
    items = list(items)
    return len(items) >= 2 and len({i.category for i in items}) >= 2
