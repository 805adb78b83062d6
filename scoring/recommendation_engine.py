"""Recommendation engine: quiz profile + catalog snapshot -> ranked looks.

Pipeline: prefilter -> partition -> score/assemble -> (fallback). The engine
is a pure function of its inputs plus the injected random source; it keeps
no state between calls. Callers thread "already shown" ids through an
exclusion set, which regenerate_looks() returns explicitly.

Tie-break jitter comes from `rng`. Pass a seeded random.Random (or a
ScoringConfig from config.without_jitter()) for reproducible output.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

import numpy as np

from components.product_catalog import CatalogItem
from components.profile_builder import PreferenceProfile
from config import DEFAULT_SCORING_CONFIG, LOOK_COUNT, STYLES, ScoringConfig, get_settings
from scoring.fallback import generate_fallback_looks
from scoring.look_assembler import assemble_looks
from scoring.looks import Look, meets_composition_floor
from scoring.prefilter import partition_by_category, prefilter_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegenerationResult:
    looks: List[Look]
    exclusion: FrozenSet[str]
    pool_reset: bool = False


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Jitter source; falls back to DRESSER_JITTER_SEED, then system entropy."""
    if seed is None:
        seed = get_settings().jitter_seed
    return random.Random(seed)


def generate_looks(
    profile: PreferenceProfile,
    catalog: Iterable[CatalogItem],
    exclude: AbstractSet[str] = frozenset(),
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
    look_count: int = LOOK_COUNT,
) -> List[Look]:
    if rng is None:
        rng = make_rng()

    eligible = prefilter_catalog(catalog, profile, exclude)
    pools = partition_by_category(eligible)
    logger.debug(
        "Pools after prefilter: apparel=%d accessories=%d footwear=%d (excluded=%d)",
        len(pools.apparel), len(pools.accessories), len(pools.footwear), len(exclude),
    )

    looks = assemble_looks(pools, profile, config, rng, look_count)
    if looks:
        return looks

    if eligible:
        logger.info("Scored assembly produced no looks from %d items; using fallback", len(eligible))
    return generate_fallback_looks(eligible, profile, look_count)


def shown_ids(looks: Iterable[Look]) -> FrozenSet[str]:
    return frozenset(pid for look in looks for pid in look.product_ids)


def extend_exclusion(exclusion: AbstractSet[str], looks: Iterable[Look]) -> FrozenSet[str]:
    """New exclusion set with every id in `looks` added; `exclusion` is untouched."""
    return frozenset(exclusion) | shown_ids(looks)


def regenerate_looks(
    profile: PreferenceProfile,
    catalog: Sequence[CatalogItem],
    previously_shown: Iterable[str],
    *,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
    look_count: int = LOOK_COUNT,
) -> RegenerationResult:
    """Fresh looks avoiding previously shown ids.

    When exclusion leaves nothing to recommend, retries exactly once with an
    empty exclusion set and reports it through `pool_reset`.
    """
    if rng is None:
        rng = make_rng()
    exclusion = frozenset(pid for pid in previously_shown if pid)

    looks = generate_looks(profile, catalog, exclusion, config=config, rng=rng, look_count=look_count)
    # A best-effort look below the composition floor still counts as exhausted.
    if any(meets_composition_floor(look.items) for look in looks):
        return RegenerationResult(looks=looks, exclusion=extend_exclusion(exclusion, looks))

    logger.info("Catalog exhausted by %d excluded ids; retrying with a fresh pool", len(exclusion))
    looks = generate_looks(profile, catalog, frozenset(), config=config, rng=rng, look_count=look_count)
    return RegenerationResult(looks=looks, exclusion=shown_ids(looks), pool_reset=True)


def summarize_looks(looks: Sequence[Look], products_analyzed: int) -> Dict[str, Any]:
    prices = [look.total_price for look in looks]
    return {
        "total_looks": len(looks),
        "total_items": sum(len(look.items) for look in looks),
        "average_look_price": int(round(float(np.mean(prices)))) if prices else 0,
        "products_analyzed": products_analyzed,
    }


def stylist_message(profile: PreferenceProfile, looks: Sequence[Look]) -> str:
    if not looks:
        return "We couldn't find items matching your preferences right now. Try a different budget or style."
    style = STYLES.get(profile.style, profile.style.replace("-", " ")).lower() or "curated"
    noun = "gift sets" if profile.is_gift else "looks"
    if profile.is_gift:
        return f"Here are {len(looks)} {style} {noun} they'll love!"
    return f"Here are {len(looks)} amazing {style} {noun} curated just for you!"


def build_recommendation_response(
    profile: PreferenceProfile,
    looks: Sequence[Look],
    products_analyzed: int,
) -> Dict[str, Any]:
    """Response envelope consumed by the storefront (and printed by the CLI)."""
    return {
        "success": True,
        "stylist_message": stylist_message(profile, looks),
        "looks": [look.to_dict() for look in looks],
        "stats": summarize_looks(looks, products_analyzed),
        "based_on": profile.as_answers(),
    }
