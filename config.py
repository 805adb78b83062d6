"""Centralized configuration for the AI Dresser look engine.

Single source of truth for quiz enums, keyword tables, scoring weights and
naming templates. Every module that needs a style/occasion/palette list
should import from here.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# ── Quiz enums (canonical set) ─────────────────────────────────────────
# Used by: profile builder, Streamlit quiz, CLI validation, scoring engine.

STYLES = {
    "casual-street": "Casual Street",
    "smart-casual": "Smart Casual",
    "formal-elegant": "Formal Elegant",
    "athleisure": "Athleisure",
    "minimalist": "Minimalist",
    "trendy": "Trendy",
}

OCCASIONS = {
    "daily-wear": "Daily Wear",
    "work-office": "Work / Office",
    "date-night": "Date Night",
    "wedding-event": "Wedding / Event",
    "vacation": "Vacation",
    "party": "Party / Night Out",
}

GIFT_OCCASIONS = {
    "birthday": "Birthday",
    "anniversary": "Anniversary",
    "christmas": "Christmas",
    "valentines": "Valentine's Day",
    "graduation": "Graduation",
    "just-because": "Just Because",
}

AI_DECIDE = "ai-decide"

COLOR_MOODS = {
    "neutrals": "Neutrals",
    "dark": "Dark Colors",
    "earth": "Earth Tones",
    "bright": "Bright & Bold",
    "pastels": "Soft Pastels",
    AI_DECIDE: "Let AI Decide",
}

BUDGET_OPTIONS = {
    "2000": "Under ₱2,000",
    "5000": "₱2,000 - ₱5,000",
    "10000": "₱5,000 - ₱10,000",
    "999999": "₱10,000+",
}

RECIPIENTS = {
    "partner": "Partner / Spouse",
    "parent": "Parent",
    "friend": "Friend",
    "sibling": "Sibling",
    "colleague": "Colleague",
}

PURPOSES = ["personal", "gift"]
GENDERS = ["male", "female", "unisex"]

# ── Catalog categories ─────────────────────────────────────────────────

APPAREL = "apparel"
ACCESSORY = "accessory"
FOOTWEAR = "footwear"
CATEGORIES = [APPAREL, ACCESSORY, FOOTWEAR]

# Storefront exports use plural/legacy names; map them onto the canonical set.
CATEGORY_ALIASES = {
    "apparel": APPAREL,
    "clothes": APPAREL,
    "clothing": APPAREL,
    "accessory": ACCESSORY,
    "accessories": ACCESSORY,
    "footwear": FOOTWEAR,
    "shoes": FOOTWEAR,
    "shoe": FOOTWEAR,
}

GENDER_ALIASES = {
    "male": "male", "men": "male", "man": "male", "m": "male",
    "female": "female", "women": "female", "woman": "female", "f": "female",
    "unisex": "unisex",
}

# Sets for fast lookup (used by validation)
STYLES_SET = set(STYLES)
OCCASIONS_SET = set(OCCASIONS) | set(GIFT_OCCASIONS)
COLOR_MOODS_SET = set(COLOR_MOODS)
CATEGORIES_SET = set(CATEGORIES)

# ── Keyword tables ─────────────────────────────────────────────────────
# Matched as substrings against an item's style tags, occasion tags and
# free-text tags.

STYLE_KEYWORDS = {
    "casual-street": ["casual", "streetwear", "urban", "relaxed", "everyday"],
    "smart-casual": ["smart", "business", "polished", "refined", "classic"],
    "formal-elegant": ["formal", "elegant", "sophisticated", "dressy", "luxury"],
    "athleisure": ["athletic", "sporty", "active", "comfort", "performance"],
    "minimalist": ["minimal", "simple", "clean", "basic", "essential"],
    "trendy": ["trendy", "fashion", "modern", "contemporary", "statement"],
}

OCCASION_KEYWORDS = {
    "daily-wear": ["everyday", "casual", "daily", "versatile"],
    "work-office": ["office", "business", "professional", "work"],
    "date-night": ["date", "evening", "romantic", "special"],
    "wedding-event": ["wedding", "formal", "event", "party"],
    "vacation": ["vacation", "travel", "resort", "leisure"],
    "party": ["party", "night", "club", "celebration"],
    "birthday": ["gift", "special", "celebration"],
    "anniversary": ["gift", "romantic", "special", "luxury"],
    "christmas": ["gift", "holiday", "festive"],
    "valentines": ["gift", "romantic", "love"],
    "graduation": ["gift", "celebration", "formal"],
    "just-because": ["gift", "versatile", "everyday"],
}

# ── Color harmony (fashion color theory) ───────────────────────────────

COLOR_HARMONY = {
    "neutrals": ["black", "white", "gray", "beige", "navy", "brown"],
    "dark": ["black", "navy", "charcoal", "burgundy", "forest", "brown"],
    "earth": ["brown", "tan", "olive", "rust", "beige", "forest"],
    "bright": ["red", "blue", "yellow", "orange", "green", "pink"],
    "pastels": ["pink", "blue", "lavender", "mint", "peach", "cream"],
}

# "Let AI decide" accepts every curated color.
BROAD_PALETTE = [
    "black", "white", "gray", "beige", "navy", "brown", "red", "blue",
    "green", "pink", "yellow", "orange", "purple", "burgundy", "olive",
    "tan", "cream", "charcoal", "forest", "mint", "lavender", "peach", "rust",
]

# ── Size class inference ───────────────────────────────────────────────
# Subcategory keywords that tell which quiz size applies to an apparel item.

SIZE_CLASS_KEYWORDS = {
    "top": ["shirt", "jacket", "hoodie", "top", "tee", "polo", "sweater", "blazer"],
    "bottom": ["pant", "short", "jean", "trouser", "chino", "jogger", "skirt"],
}

# ── Scoring weights ────────────────────────────────────────────────────

SCORING_WEIGHTS = {
    "style_match": 18.0,
    "occasion_match": 14.0,
    "color_harmony": 12.0,
    "color_variety": 5.0,
    "size_match": 15.0,
    "brand_diversity": 6.0,
    "subcategory_diversity": 8.0,
    "gift_suitable": 20.0,
    "premium_brand": 8.0,
    "featured": 8.0,
    "good_value": 5.0,
    "premium_pick": 3.0,
    "random_variety": 5.0,
}

PREMIUM_BRANDS = ["Calvin Klein", "Ralph Lauren", "Michael Kors"]

# ── Budget allocation ──────────────────────────────────────────────────
# Fractions of the remaining per-look budget.

DEFAULT_BUDGET = 10000.0
LOOK_COUNT = 5
MAX_APPAREL_PER_LOOK = 2
APPAREL_BUDGET_SHARE = 0.7
ACCESSORY_BUDGET_SHARE = 0.5
PREMIUM_PRICE_SHARE = 0.3
VALUE_BAND = (0.3, 0.6)
PREMIUM_PICK_SHARE = 0.8

# ── Look naming ────────────────────────────────────────────────────────

PERSONAL_LOOKS = [
    ("Everyday Essential", "Your go-to outfit for daily adventures"),
    ("Signature Style", "A look that defines your fashion identity"),
    ("Weekend Ready", "Comfortable yet stylish for off-duty days"),
    ("Statement Maker", "Turn heads with this bold ensemble"),
    ("Classic Refined", "Timeless elegance that never goes out of style"),
]

GIFT_SETS = [
    ("Premium Gift Set", "A luxurious collection they'll treasure"),
    ("Style Starter Kit", "Everything needed to elevate their wardrobe"),
    ("Occasion Perfect", "Curated for your special celebration"),
    ("Thoughtful Collection", "A meaningful gift they'll love"),
    ("Complete Look Gift", "Head-to-toe style in one package"),
]

OCCASION_SPECIFIC_NAMES = {
    "date-night": ("Date Night Perfection", "Make a lasting impression"),
    "work-office": ("Office Ready", "Professional yet stylish"),
    "wedding-event": ("Event Elegance", "Stand out at any occasion"),
    "vacation": ("Vacation Vibes", "Travel in style"),
    "party": ("Party Mode", "Ready to celebrate"),
}

# ── Item defaults ──────────────────────────────────────────────────────

PLACEHOLDER_IMAGE = "/placeholder.jpg"
PRODUCT_URL_TEMPLATE = "/shop/{product_id}"

DEFAULT_NOTES = {
    APPAREL: "{brand} signature piece",
    ACCESSORY: "The perfect finishing touch",
    FOOTWEAR: "Completes the look perfectly",
}

FALLBACK_NOTES = {
    APPAREL: "{brand} quality",
    ACCESSORY: "Adds style",
    FOOTWEAR: "Completes the look",
}


def _freeze(table: Dict[str, list]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


@dataclass(frozen=True)
class ScoringConfig:
    """Immutable bundle of every table the scorer and assembler read."""

    style_keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: _freeze(STYLE_KEYWORDS)
    )
    occasion_keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: _freeze(OCCASION_KEYWORDS)
    )
    color_harmony: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: _freeze(COLOR_HARMONY)
    )
    broad_palette: Tuple[str, ...] = tuple(BROAD_PALETTE)
    size_class_keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: _freeze(SIZE_CLASS_KEYWORDS)
    )
    weights: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(SCORING_WEIGHTS))
    )
    premium_brands: Tuple[str, ...] = tuple(PREMIUM_BRANDS)
    default_budget: float = DEFAULT_BUDGET
    max_apparel_per_look: int = MAX_APPAREL_PER_LOOK
    apparel_budget_share: float = APPAREL_BUDGET_SHARE
    accessory_budget_share: float = ACCESSORY_BUDGET_SHARE
    premium_price_share: float = PREMIUM_PRICE_SHARE
    value_band: Tuple[float, float] = VALUE_BAND
    premium_pick_share: float = PREMIUM_PICK_SHARE

    def weight(self, key: str) -> float:
        return float(self.weights.get(key, 0.0))

    def with_weights(self, **overrides: float) -> "ScoringConfig":
        merged = dict(self.weights)
        merged.update(overrides)
        return replace(self, weights=MappingProxyType(merged))

    def without_jitter(self) -> "ScoringConfig":
        """Same tables with the tie-break jitter disabled (deterministic ranking)."""
        return self.with_weights(random_variety=0.0)


DEFAULT_SCORING_CONFIG = ScoringConfig()

# ── Runtime settings ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    jitter_seed: Optional[int] = None
    catalog_path: str = ""
    catalog_url: str = ""


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return None


@lru_cache
def get_settings() -> Settings:
    """Environment-backed settings; call load_dotenv() first in entry points."""
    return Settings(
        log_level=os.getenv("DRESSER_LOG_LEVEL", "INFO"),
        jitter_seed=_env_int("DRESSER_JITTER_SEED"),
        catalog_path=os.getenv("DRESSER_CATALOG_PATH", ""),
        catalog_url=os.getenv("DRESSER_CATALOG_URL", ""),
    )


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
