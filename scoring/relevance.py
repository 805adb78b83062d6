"""Relevance scoring: how well one catalog item fits a preference profile.

Scores are additive points (see SCORING_WEIGHTS in config.py). Each signal
that fires appends a human-readable reason; the first reason becomes the
item's styling note when it is placed in a look.

Novelty bonuses (color/brand/subcategory) are evaluated against the look
currently being assembled only, never against the other looks of the batch.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from components.product_catalog import CatalogItem
from components.profile_builder import PreferenceProfile
from config import AI_DECIDE, APPAREL, DEFAULT_SCORING_CONFIG, FOOTWEAR, ScoringConfig


@dataclass(frozen=True)
class ScoredCandidate:
    item: CatalogItem
    score: float
    reasons: Tuple[str, ...] = ()


@dataclass
class LookContext:
    """Per-look state: what the look already contains and what budget is left."""

    remaining_budget: float
    used_colors: Set[str] = field(default_factory=set)
    used_brands: Set[str] = field(default_factory=set)
    used_subcategories: Set[str] = field(default_factory=set)

    def record(self, item: CatalogItem) -> None:
        self.used_brands.add(item.brand)
        self.used_subcategories.add(item.subcategory or item.category)
        self.used_colors.update(c.lower() for c in item.colors)
        self.remaining_budget -= item.price


def _lower(values: Iterable[str]) -> List[str]:
    return [v.lower() for v in values]


def _first_keyword_hit(keywords: Sequence[str], *tag_lists: Sequence[str]) -> Optional[str]:
    for keyword in keywords:
        for tags in tag_lists:
            if any(keyword in tag for tag in tags):
                return keyword
    return None


def palette_for(color_mood: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> Tuple[str, ...]:
    if not color_mood or color_mood == AI_DECIDE:
        return config.broad_palette
    return tuple(config.color_harmony.get(color_mood, ()))


def infer_size_class(subcategory: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> Optional[str]:
    """'top' / 'bottom' from subcategory keywords, None when ambiguous or unknown."""
    sub = (subcategory or "").lower()
    hits = [
        size_class
        for size_class, keywords in config.size_class_keywords.items()
        if any(k in sub for k in keywords)
    ]
    return hits[0] if len(hits) == 1 else None


def _size_available(item: CatalogItem, profile: PreferenceProfile, config: ScoringConfig) -> bool:
    sizes = profile.sizes
    if sizes is None:
        return False
    offered = {s.upper() for s in item.sizes}

    def has(size: str) -> bool:
        return bool(size) and size.upper() in offered

    if item.category == FOOTWEAR:
        return has(sizes.shoe)
    if item.category != APPAREL:
        return False

    size_class = infer_size_class(item.subcategory, config)
    if size_class == "top":
        return has(sizes.top)
    if size_class == "bottom":
        return has(sizes.bottom)
    return has(sizes.top) or has(sizes.bottom)


def score_item(
    item: CatalogItem,
    profile: PreferenceProfile,
    context: LookContext,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
) -> ScoredCandidate:
    w = config.weight
    score = 0.0
    reasons: List[str] = []

    tags = _lower(item.tags)
    styles = _lower(item.styles)
    occasions = _lower(item.occasions)

    # ── Style / occasion: first keyword hit only ──
    keyword = _first_keyword_hit(config.style_keywords.get(profile.style, ()), tags, styles)
    if keyword:
        score += w("style_match")
        reasons.append(f"Style match: {keyword}")

    keyword = _first_keyword_hit(config.occasion_keywords.get(profile.occasion, ()), occasions, tags)
    if keyword:
        score += w("occasion_match")
        reasons.append(f"Occasion match: {keyword}")

    # ── Color harmony (substring tolerant both ways) ──
    palette = palette_for(profile.color_mood, config)
    for color in item.colors:
        color = color.lower()
        if any(pc in color or color in pc for pc in palette):
            score += w("color_harmony")
            reasons.append(f"Color match: {color}")
            if color not in context.used_colors:
                score += w("color_variety")
                reasons.append("Adds color variety")
            break

    if _size_available(item, profile, config):
        score += w("size_match")
        reasons.append("Size available")

    # ── Diversity within the look ──
    if item.brand not in context.used_brands:
        score += w("brand_diversity")
    if (item.subcategory or item.category) not in context.used_subcategories:
        score += w("subcategory_diversity")

    if profile.is_gift:
        if item.gift_suitable:
            score += w("gift_suitable")
            reasons.append("Gift suitable")
        premium = {b.lower() for b in config.premium_brands}
        if item.brand.lower() in premium:
            score += w("premium_brand")
            reasons.append("Premium brand")

    if item.featured:
        score += w("featured")
        reasons.append("Featured/Popular")

    # ── Price balance against what is left of the look budget ──
    if context.remaining_budget > 0:
        ratio = item.price / context.remaining_budget
        low, high = config.value_band
        if low <= ratio <= high:
            score += w("good_value")
            reasons.append("Good value")
        elif ratio > config.premium_pick_share:
            score += w("premium_pick")
            reasons.append("Premium pick")

    jitter = w("random_variety")
    if jitter > 0 and rng is not None:
        score += rng.random() * jitter

    return ScoredCandidate(item=item, score=score, reasons=tuple(reasons))


def rank_candidates(
    items: Iterable[CatalogItem],
    profile: PreferenceProfile,
    context: LookContext,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: Optional[random.Random] = None,
) -> List[ScoredCandidate]:
    scored = [score_item(item, profile, context, config, rng) for item in items]
    scored.sort(key=lambda c: c.score, reverse=True)
    return scored
