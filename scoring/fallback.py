"""Fallback generator: unscored round-robin looks.

Runs only when the scored assembler produced nothing. Items are taken in
catalog order with no budget gating beyond the prefilter's ceiling.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Set

from components.product_catalog import CatalogItem
from components.profile_builder import PreferenceProfile
from config import FALLBACK_NOTES, LOOK_COUNT, MAX_APPAREL_PER_LOOK
from scoring.look_namer import fallback_name
from scoring.looks import Look, LookItem, meets_composition_floor, to_look_item
from scoring.prefilter import CategoryPools, partition_by_category

logger = logging.getLogger(__name__)


def _fallback_item(item: CatalogItem) -> LookItem:
    return to_look_item(item, FALLBACK_NOTES[item.category].format(brand=item.brand))


def _next_unused(pool: Iterable[CatalogItem], used: Set[str], limit: int) -> List[CatalogItem]:
    picked: List[CatalogItem] = []
    for item in pool:
        if len(picked) >= limit:
            break
        if item.id not in used:
            picked.append(item)
    return picked


def _round_robin_items(pools: CategoryPools, used: Set[str]) -> List[CatalogItem]:
    picked = _next_unused(pools.apparel, used, MAX_APPAREL_PER_LOOK)
    picked += _next_unused(pools.accessories, used, 1)
    picked += _next_unused(pools.footwear, used, 1)
    return picked


def _make_look(index: int, profile: PreferenceProfile, items: List[CatalogItem]) -> Look:
    name, description = fallback_name(index, profile)
    return Look(
        look_number=index + 1,
        name=name,
        description=description,
        items=tuple(_fallback_item(i) for i in items),
        style_tip="A versatile combination",
        is_fallback=True,
    )


def generate_fallback_looks(
    items: Iterable[CatalogItem],
    profile: PreferenceProfile,
    look_count: int = LOOK_COUNT,
) -> List[Look]:
    """Non-empty whenever `items` has at least one categorized item."""
    pools = partition_by_category(item for item in items if item.id)
    if not len(pools):
        return []

    slots = min(look_count, max(1, math.ceil(len(pools.apparel) / MAX_APPAREL_PER_LOOK)))
    used: Set[str] = set()
    looks: List[Look] = []

    for index in range(slots):
        picked = _round_robin_items(pools, used)
        if not meets_composition_floor(_fallback_item(i) for i in picked):
            continue
        used.update(i.id for i in picked)
        looks.append(_make_look(index, profile, picked))

    if not looks:
        # The catalog cannot satisfy the two-category floor; still show something.
        best_effort = _round_robin_items(pools, set())
        logger.info("Fallback produced no full look; emitting best-effort look with %d item(s)",
                    len(best_effort))
        looks.append(_make_look(0, profile, best_effort))

    return looks
