"""Deterministic look names, descriptions and style tips."""
from __future__ import annotations

from typing import Sequence, Tuple

from components.profile_builder import PreferenceProfile
from config import (
    AI_DECIDE,
    COLOR_MOODS,
    GIFT_SETS,
    OCCASION_SPECIFIC_NAMES,
    OCCASIONS,
    GIFT_OCCASIONS,
    PERSONAL_LOOKS,
    STYLES,
)
from scoring.looks import LookItem


def _label(value: str, table: dict) -> str:
    return table.get(value) or value.replace("-", " ") or "curated"


def name_look(index: int, profile: PreferenceProfile) -> Tuple[str, str]:
    """(name, description) for the look in slot `index` (0-based)."""
    if not profile.is_gift and index == 0 and profile.occasion in OCCASION_SPECIFIC_NAMES:
        return OCCASION_SPECIFIC_NAMES[profile.occasion]
    templates = GIFT_SETS if profile.is_gift else PERSONAL_LOOKS
    return templates[index % len(templates)]


def fallback_name(index: int, profile: PreferenceProfile) -> Tuple[str, str]:
    prefix = "Gift Set" if profile.is_gift else "Look"
    return f"{prefix} #{index + 1}", "A curated selection just for you"


def style_tip(index: int, profile: PreferenceProfile, items: Sequence[LookItem]) -> str:
    style = _label(profile.style, STYLES).lower()
    occasion = _label(profile.occasion, {**OCCASIONS, **GIFT_OCCASIONS}).lower()
    if profile.color_mood == AI_DECIDE:
        color_tip = "Curated with a balanced mix of colors"
    else:
        color_tip = f"Curated for your {_label(profile.color_mood, COLOR_MOODS).lower()} palette"

    tips = [
        f"This {style} look pairs perfectly together",
        "A complete head-to-toe ensemble" if len(items) >= 3 else "Mix and match with your existing wardrobe",
        "A thoughtful gift they'll love" if profile.is_gift else f"Perfect for {occasion}",
        "Each piece complements the others beautifully",
        color_tip,
    ]
    return tips[index] if 0 <= index < len(tips) else tips[0]
