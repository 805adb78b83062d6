"""Look assembler: greedy, budget-aware selection of 2-4 items per look.

For every look slot the assembler fills apparel first (up to two pieces,
alternating a premium and a value bias), then one accessory, then one pair
of footwear, each step gated by what is left of the per-look budget:

- apparel: price <= 70% of remaining budget
- accessory: price <= 50% of remaining budget
- footwear: price <= remaining budget

All thresholds are inclusive. A slot that cannot reach two items across two
categories is skipped and its picks go back to the pool.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Set

from components.profile_builder import PreferenceProfile
from config import DEFAULT_NOTES, DEFAULT_SCORING_CONFIG, LOOK_COUNT, ScoringConfig
from scoring.look_namer import name_look, style_tip
from scoring.looks import Look, LookItem, meets_composition_floor, to_look_item
from scoring.prefilter import CategoryPools
from scoring.relevance import LookContext, ScoredCandidate, rank_candidates

logger = logging.getLogger(__name__)

# Absorbs float error in `remaining * share` so prices at a threshold still pass.
_EPS = 1e-6


def _within(price: float, ceiling: float) -> bool:
    return price <= ceiling + _EPS


def _note(candidate: ScoredCandidate) -> str:
    if candidate.reasons:
        return candidate.reasons[0]
    return DEFAULT_NOTES[candidate.item.category].format(brand=candidate.item.brand)


def _take(candidate: ScoredCandidate, context: LookContext, items: List[LookItem], taken: Set[str]) -> None:
    context.record(candidate.item)
    taken.add(candidate.item.id)
    items.append(to_look_item(candidate.item, _note(candidate)))


def _pick_apparel(
    pools: CategoryPools,
    profile: PreferenceProfile,
    context: LookContext,
    used: Set[str],
    index: int,
    config: ScoringConfig,
    rng: Optional[random.Random],
    items: List[LookItem],
    taken: Set[str],
) -> None:
    ranked = rank_candidates(
        (p for p in pools.apparel if p.id not in used), profile, context, config, rng
    )
    picked = 0
    # Even slots lead premium, odd slots lead value; flips after every pick.
    want_premium = index % 2 == 0
    for candidate in ranked:
        if picked >= config.max_apparel_per_look:
            break
        price = candidate.item.price
        if not _within(price, context.remaining_budget * config.apparel_budget_share):
            continue  # leave room for accessory and footwear
        is_premium = price > context.remaining_budget * config.premium_price_share
        if picked and is_premium != want_premium:
            continue
        _take(candidate, context, items, taken)
        picked += 1
        want_premium = not want_premium


def _pick_accessory(pools, profile, context, used, config, rng, items, taken) -> None:
    ceiling = context.remaining_budget * config.accessory_budget_share
    ranked = rank_candidates(
        (p for p in pools.accessories if p.id not in used and _within(p.price, ceiling)),
        profile, context, config, rng,
    )
    if ranked:
        _take(ranked[0], context, items, taken)


def _pick_footwear(pools, profile, context, used, config, rng, items, taken) -> None:
    ceiling = context.remaining_budget
    ranked = rank_candidates(
        (p for p in pools.footwear if p.id not in used and _within(p.price, ceiling)),
        profile, context, config, rng,
    )
    if ranked:
        _take(ranked[0], context, items, taken)


def assemble_look(
    index: int,
    pools: CategoryPools,
    profile: PreferenceProfile,
    used: Set[str],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
) -> Optional[Look]:
    """Build the look for slot `index`; adds its ids to `used` only on success."""
    context = LookContext(remaining_budget=profile.budget_or(config.default_budget))
    items: List[LookItem] = []
    taken: Set[str] = set()

    # `taken` joins the exclusion so the accessory/footwear steps never re-pick.
    _pick_apparel(pools, profile, context, used, index, config, rng, items, taken)
    _pick_accessory(pools, profile, context, used | taken, config, rng, items, taken)
    _pick_footwear(pools, profile, context, used | taken, config, rng, items, taken)

    if not meets_composition_floor(items):
        logger.debug("Look slot %d skipped: %d item(s) over %d categor(ies)",
                     index, len(items), len({i.category for i in items}))
        return None

    used.update(taken)
    name, description = name_look(index, profile)
    return Look(
        look_number=index + 1,
        name=name,
        description=description,
        items=tuple(items),
        style_tip=style_tip(index, profile, items),
    )


def assemble_looks(
    pools: CategoryPools,
    profile: PreferenceProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
    look_count: int = LOOK_COUNT,
) -> List[Look]:
    used: Set[str] = set()
    looks: List[Look] = []
    for index in range(look_count):
        look = assemble_look(index, pools, profile, used, config, rng)
        if look is not None:
            looks.append(look)
    return looks
