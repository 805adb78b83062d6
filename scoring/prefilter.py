"""Catalog prefilter and category partitioner.

The prefilter narrows a catalog snapshot to items that can be recommended at
all (identified, priced, in stock, not excluded, gender compatible, under the budget
ceiling). The partitioner splits the survivors into the three pools the look
assembler draws from.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Tuple

from components.product_catalog import CatalogItem
from components.profile_builder import PreferenceProfile
from config import ACCESSORY, APPAREL, FOOTWEAR


@dataclass(frozen=True)
class CategoryPools:
    apparel: Tuple[CatalogItem, ...] = ()
    accessories: Tuple[CatalogItem, ...] = ()
    footwear: Tuple[CatalogItem, ...] = ()

    def __len__(self) -> int:
        return len(self.apparel) + len(self.accessories) + len(self.footwear)


def _gender_ok(item: CatalogItem, profile: PreferenceProfile) -> bool:
    if not profile.gender or profile.gender == "unisex":
        return True
    return item.gender in (profile.gender, "unisex")


def prefilter_catalog(
    catalog: Iterable[CatalogItem],
    profile: PreferenceProfile,
    exclude: AbstractSet[str] = frozenset(),
) -> List[CatalogItem]:
    """Keep eligible items in catalog order. Never raises; [] is a valid result."""
    ceiling = profile.budget  # None when the quiz budget was unparsable
    out: List[CatalogItem] = []
    for item in catalog:
        if not item.id or item.id in exclude:
            continue
        if not item.in_stock or item.stock_qty <= 0 or item.price <= 0:
            continue
        if not _gender_ok(item, profile):
            continue
        if ceiling is not None and item.price > ceiling:
            continue
        out.append(item)
    return out


def partition_by_category(items: Iterable[CatalogItem]) -> CategoryPools:
    apparel, accessories, footwear = [], [], []
    for item in items:
        if item.category == APPAREL:
            apparel.append(item)
        elif item.category == ACCESSORY:
            accessories.append(item)
        elif item.category == FOOTWEAR:
            footwear.append(item)
    return CategoryPools(tuple(apparel), tuple(accessories), tuple(footwear))
