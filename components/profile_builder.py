from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from config import (
    AI_DECIDE,
    COLOR_MOODS_SET,
    DEFAULT_BUDGET,
    GENDER_ALIASES,
    OCCASIONS_SET,
    STYLES_SET,
)

logger = logging.getLogger(__name__)

_BUDGET_CLEAN_RE = re.compile(r"[,\s₱$]")


@dataclass(frozen=True)
class SizeProfile:
    top: str = ""
    bottom: str = ""
    shoe: str = ""

    def is_empty(self) -> bool:
        return not (self.top or self.bottom or self.shoe)


@dataclass(frozen=True)
class GiftDetails:
    """Recipient info, only present on gift profiles."""

    recipient: str = ""
    relationship: str = ""


@dataclass(frozen=True)
class PreferenceProfile:
    style: str
    occasion: str
    budget: Optional[float] = None
    color_mood: str = AI_DECIDE
    gender: Optional[str] = None
    sizes: Optional[SizeProfile] = None
    gift: Optional[GiftDetails] = None

    def __post_init__(self) -> None:
        # Budgets arrive free-form; anything unusable becomes None (default budget).
        object.__setattr__(self, "budget", parse_budget(self.budget))

    @property
    def purpose(self) -> str:
        return "gift" if self.gift is not None else "personal"

    @property
    def is_gift(self) -> bool:
        return self.gift is not None

    @property
    def effective_budget(self) -> float:
        return self.budget_or(DEFAULT_BUDGET)

    def budget_or(self, default: float) -> float:
        return self.budget if self.budget is not None else default

    def as_answers(self) -> Dict[str, Any]:
        """Flatten back to the quiz-answer shape (used for `based_on` echoes)."""
        out: Dict[str, Any] = {
            "purpose": self.purpose,
            "gender": self.gender,
            "style": self.style,
            "occasion": self.occasion,
            "budget": self.budget,
            "color": self.color_mood,
        }
        if self.sizes is not None:
            out["sizes"] = {"top": self.sizes.top, "bottom": self.sizes.bottom, "shoe": self.sizes.shoe}
        if self.gift is not None:
            out["recipient"] = self.gift.recipient
            out["relationship"] = self.gift.relationship
        return out


def parse_budget(value: Any) -> Optional[float]:
    """Parse a free-form budget; None when missing, unparsable or non-positive.

    Accepts numbers and numeric strings with thousands separators or a
    currency sign ("5000", "5,000", "₱5000").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        cleaned = _BUDGET_CLEAN_RE.sub("", str(value))
        try:
            amount = float(cleaned)
        except ValueError:
            return None
    if amount != amount or amount <= 0:  # NaN or non-positive
        return None
    return amount


def _clean(value: Any) -> str:
    return str(value or "").strip().lower()


def _build_sizes(raw: Any) -> Optional[SizeProfile]:
    if not isinstance(raw, Mapping):
        return None
    sizes = SizeProfile(
        top=str(raw.get("top") or "").strip(),
        bottom=str(raw.get("bottom") or "").strip(),
        shoe=str(raw.get("shoe") or "").strip(),
    )
    return None if sizes.is_empty() else sizes


def build_preference_profile(answers: Mapping[str, Any]) -> PreferenceProfile:
    """Turn raw quiz answers into an immutable PreferenceProfile.

    Unknown enum values are kept (they simply never match a keyword table)
    but logged, so a quiz/engine version drift shows up in the logs.
    """
    style = _clean(answers.get("style"))
    occasion = _clean(answers.get("occasion"))
    color_mood = _clean(answers.get("color")) or AI_DECIDE

    if style and style not in STYLES_SET:
        logger.warning("Unknown style '%s' in quiz answers", style)
    if occasion and occasion not in OCCASIONS_SET:
        logger.warning("Unknown occasion '%s' in quiz answers", occasion)
    if color_mood not in COLOR_MOODS_SET:
        logger.warning("Unknown color mood '%s', treating as %s", color_mood, AI_DECIDE)
        color_mood = AI_DECIDE

    gender = GENDER_ALIASES.get(_clean(answers.get("gender")))

    gift = None
    if _clean(answers.get("purpose")) == "gift":
        gift = GiftDetails(
            recipient=str(answers.get("recipient") or "").strip(),
            relationship=str(answers.get("relationship") or "").strip(),
        )

    return PreferenceProfile(
        style=style,
        occasion=occasion,
        budget=parse_budget(answers.get("budget")),
        color_mood=color_mood,
        gender=gender,
        sizes=_build_sizes(answers.get("sizes")),
        gift=gift,
    )
