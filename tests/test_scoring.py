"""Unit tests for relevance scoring: keyword signals, color harmony, size fit, novelty, price balance."""
from __future__ import annotations

import random
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from components.profile_builder import GiftDetails, PreferenceProfile, SizeProfile
from config import BROAD_PALETTE, DEFAULT_SCORING_CONFIG
from scoring.relevance import (
    LookContext,
    infer_size_class,
    palette_for,
    rank_candidates,
    score_item,
)


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════

@pytest.fixture
def street_profile():
    return PreferenceProfile(
        style="casual-street", occasion="daily-wear", budget=10000.0, color_mood="neutrals"
    )


@pytest.fixture
def sized_profile():
    return PreferenceProfile(
        style="minimalist",
        occasion="vacation",
        budget=10000.0,
        color_mood="pastels",
        sizes=SizeProfile(top="M", bottom="32", shoe="9"),
    )


@pytest.fixture
def gap_jeans(make_item):
    return make_item(
        "gap-jeans",
        subcategory="jeans",
        brand="GAP",
        price=1000.0,
        colors=("black",),
        tags=("casual", "everyday"),
    )


@pytest.fixture
def fresh_context():
    return LookContext(remaining_budget=10000.0)


# ══════════════════════════════════════════════════════════════════════
# Keyword signals
# ══════════════════════════════════════════════════════════════════════

class TestKeywordSignals:
    def test_full_score_breakdown(self, gap_jeans, street_profile, fresh_context, no_jitter):
        scored = score_item(gap_jeans, street_profile, fresh_context, no_jitter)
        # style 18 + occasion 14 + color 12 + variety 5 + brand 6 + subcategory 8
        assert scored.score == 63.0
        assert scored.reasons == (
            "Style match: casual",
            "Occasion match: everyday",
            "Color match: black",
            "Adds color variety",
        )

    def test_style_counted_once(self, make_item, street_profile, no_jitter):
        one = make_item("one", tags=("casual",))
        many = make_item("many", tags=("casual", "streetwear", "urban", "relaxed"))
        a = score_item(one, street_profile, LookContext(10000.0), no_jitter)
        b = score_item(many, street_profile, LookContext(10000.0), no_jitter)
        assert a.score == b.score
        assert sum(r.startswith("Style match") for r in b.reasons) == 1

    def test_first_keyword_in_table_order_is_reported(self, make_item, street_profile, no_jitter):
        item = make_item("urban", tags=("urban", "streetwear"))
        scored = score_item(item, street_profile, LookContext(10000.0), no_jitter)
        assert "Style match: streetwear" in scored.reasons

    def test_style_tags_are_matched_too(self, make_item, street_profile, no_jitter):
        item = make_item("styled", styles=("Streetwear",))
        scored = score_item(item, street_profile, LookContext(10000.0), no_jitter)
        assert "Style match: streetwear" in scored.reasons

    def test_unknown_style_never_matches(self, make_item, no_jitter):
        profile = PreferenceProfile(style="cyberpunk", occasion="daily-wear", budget=5000.0)
        item = make_item("x", tags=("casual",))
        scored = score_item(item, profile, LookContext(5000.0), no_jitter)
        assert not any(r.startswith("Style match") for r in scored.reasons)


# ══════════════════════════════════════════════════════════════════════
# Color harmony
# ══════════════════════════════════════════════════════════════════════

class TestColorHarmony:
    def test_used_color_loses_variety_bonus(self, gap_jeans, street_profile, no_jitter):
        context = LookContext(10000.0, used_colors={"black"})
        scored = score_item(gap_jeans, street_profile, context, no_jitter)
        assert scored.score == 58.0
        assert "Adds color variety" not in scored.reasons

    def test_ai_decide_uses_broad_palette(self, make_item, no_jitter):
        item = make_item("wine", colors=("burgundy",))
        broad = PreferenceProfile(style="minimalist", occasion="vacation", budget=5000.0)
        narrow = PreferenceProfile(style="minimalist", occasion="vacation", budget=5000.0, color_mood="pastels")
        assert "Color match: burgundy" in score_item(item, broad, LookContext(5000.0), no_jitter).reasons
        assert not any(
            r.startswith("Color match") for r in score_item(item, narrow, LookContext(5000.0), no_jitter).reasons
        )

    def test_substring_tolerant(self, make_item, street_profile, no_jitter):
        item = make_item("navy", colors=("navy blue",))
        scored = score_item(item, street_profile, LookContext(10000.0), no_jitter)
        assert "Color match: navy blue" in scored.reasons

    def test_only_first_matching_color_scores(self, make_item, street_profile, no_jitter):
        item = make_item("duo", colors=("black", "white"))
        scored = score_item(item, street_profile, LookContext(10000.0), no_jitter)
        assert [r for r in scored.reasons if r.startswith("Color match")] == ["Color match: black"]

    def test_palette_for(self):
        assert palette_for("ai-decide") == tuple(BROAD_PALETTE)
        assert palette_for("") == tuple(BROAD_PALETTE)
        assert "olive" in palette_for("earth")
        assert palette_for("sepia") == ()


# ══════════════════════════════════════════════════════════════════════
# Size fit
# ══════════════════════════════════════════════════════════════════════

class TestSizeFit:
    @pytest.mark.parametrize(
        "subcategory,expected",
        [("t-shirt", "top"), ("Jeans", "bottom"), ("blazer jacket", "top"), ("scarf", None)],
    )
    def test_infer_size_class(self, subcategory, expected):
        assert infer_size_class(subcategory) == expected

    def test_ambiguous_subcategory_is_unknown(self):
        assert infer_size_class("shirt and shorts set") is None

    def test_top_uses_top_size(self, make_item, sized_profile, no_jitter):
        tee = make_item("tee", subcategory="t-shirt", sizes=("S", "M"))
        assert "Size available" in score_item(tee, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_bottom_ignores_top_size(self, make_item, sized_profile, no_jitter):
        jeans = make_item("jeans", subcategory="jeans", sizes=("M", "L"))
        assert "Size available" not in score_item(jeans, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_bottom_uses_bottom_size(self, make_item, sized_profile, no_jitter):
        jeans = make_item("jeans", subcategory="jeans", sizes=("30", "32"))
        assert "Size available" in score_item(jeans, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_unknown_class_accepts_either(self, make_item, sized_profile, no_jitter):
        item = make_item("set", subcategory="co-ord", sizes=("32",))
        assert "Size available" in score_item(item, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_case_insensitive(self, make_item, sized_profile, no_jitter):
        tee = make_item("tee", subcategory="tee", sizes=("m",))
        assert "Size available" in score_item(tee, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_footwear_uses_shoe_size(self, make_item, sized_profile, no_jitter):
        shoe = make_item("shoe", category="footwear", subcategory="sneakers", sizes=("8", "9"))
        scored = score_item(shoe, sized_profile, LookContext(10000.0), no_jitter)
        assert "Size available" in scored.reasons

    def test_accessories_never_size_match(self, make_item, sized_profile, no_jitter):
        belt = make_item("belt", category="accessory", subcategory="belt", sizes=("M",))
        assert "Size available" not in score_item(belt, sized_profile, LookContext(10000.0), no_jitter).reasons

    def test_no_sizes_no_bonus(self, make_item, street_profile, no_jitter):
        tee = make_item("tee", subcategory="t-shirt", sizes=("M",))
        assert "Size available" not in score_item(tee, street_profile, LookContext(10000.0), no_jitter).reasons


# ══════════════════════════════════════════════════════════════════════
# Novelty, gift and featured bonuses
# ══════════════════════════════════════════════════════════════════════

class TestBonuses:
    def test_brand_and_subcategory_novelty(self, gap_jeans, street_profile, no_jitter):
        context = LookContext(10000.0, used_brands={"GAP"}, used_subcategories={"jeans"})
        scored = score_item(gap_jeans, street_profile, context, no_jitter)
        assert scored.score == 63.0 - 6.0 - 8.0

    def test_empty_subcategory_falls_back_to_category(self, make_item, plain_profile, no_jitter):
        item = make_item("plain", price=10.0)
        context = LookContext(5000.0, used_subcategories={"apparel"})
        assert score_item(item, plain_profile, context, no_jitter).score == 6.0

    def test_gift_bonuses_only_for_gift_profiles(self, make_item, no_jitter):
        item = make_item("rl", brand="Ralph Lauren", gift_suitable=True, price=10.0)
        personal = PreferenceProfile(style="minimalist", occasion="vacation", budget=5000.0, color_mood="pastels")
        gift = PreferenceProfile(
            style="minimalist", occasion="vacation", budget=5000.0, color_mood="pastels", gift=GiftDetails()
        )
        p = score_item(item, personal, LookContext(5000.0), no_jitter)
        g = score_item(item, gift, LookContext(5000.0), no_jitter)
        assert g.score - p.score == 28.0
        assert g.reasons == ("Gift suitable", "Premium brand")

    def test_featured(self, make_item, plain_profile, no_jitter):
        item = make_item("hot", featured=True, price=10.0)
        scored = score_item(item, plain_profile, LookContext(5000.0), no_jitter)
        assert scored.reasons == ("Featured/Popular",)
        assert scored.score == 6.0 + 8.0 + 8.0


# ══════════════════════════════════════════════════════════════════════
# Price balance
# ══════════════════════════════════════════════════════════════════════

class TestPriceBalance:
    @pytest.mark.parametrize(
        "price,reason",
        [
            (1500.0, "Good value"),   # 0.30, inclusive
            (2000.0, "Good value"),
            (3000.0, "Good value"),   # 0.60, inclusive
            (4500.0, "Premium pick"),
        ],
    )
    def test_bands(self, make_item, plain_profile, no_jitter, price, reason):
        item = make_item("p", price=price)
        assert reason in score_item(item, plain_profile, LookContext(5000.0), no_jitter).reasons

    @pytest.mark.parametrize("price", [500.0, 3500.0, 4000.0])
    def test_outside_bands(self, make_item, plain_profile, no_jitter, price):
        item = make_item("p", price=price)
        assert score_item(item, plain_profile, LookContext(5000.0), no_jitter).reasons == ()

    def test_ratio_uses_remaining_budget(self, make_item, plain_profile, no_jitter):
        item = make_item("p", price=1000.0)
        assert score_item(item, plain_profile, LookContext(5000.0), no_jitter).reasons == ()
        assert score_item(item, plain_profile, LookContext(2000.0), no_jitter).reasons == ("Good value",)


# ══════════════════════════════════════════════════════════════════════
# Jitter and ranking
# ══════════════════════════════════════════════════════════════════════

class TestJitterAndRanking:
    def test_seeded_jitter_is_reproducible(self, gap_jeans, street_profile):
        a = score_item(gap_jeans, street_profile, LookContext(10000.0), DEFAULT_SCORING_CONFIG, random.Random(7))
        b = score_item(gap_jeans, street_profile, LookContext(10000.0), DEFAULT_SCORING_CONFIG, random.Random(7))
        assert a.score == b.score

    def test_jitter_is_bounded(self, gap_jeans, street_profile, no_jitter):
        base = score_item(gap_jeans, street_profile, LookContext(10000.0), no_jitter).score
        rng = random.Random(42)
        for _ in range(50):
            jittered = score_item(gap_jeans, street_profile, LookContext(10000.0), DEFAULT_SCORING_CONFIG, rng).score
            assert base <= jittered < base + 5.0

    def test_no_rng_means_no_jitter(self, gap_jeans, street_profile, no_jitter):
        with_default = score_item(gap_jeans, street_profile, LookContext(10000.0), DEFAULT_SCORING_CONFIG, None)
        assert with_default.score == score_item(gap_jeans, street_profile, LookContext(10000.0), no_jitter).score

    def test_weights_can_be_overridden(self, gap_jeans, street_profile, no_jitter):
        config = no_jitter.with_weights(style_match=0.0)
        assert score_item(gap_jeans, street_profile, LookContext(10000.0), config).score == 45.0
        assert DEFAULT_SCORING_CONFIG.weight("style_match") == 18.0

    def test_rank_is_descending(self, make_item, street_profile, no_jitter):
        items = [
            make_item("plain", price=10.0),
            make_item("tagged", tags=("casual",), price=10.0),
            make_item("featured", featured=True, price=10.0),
        ]
        ranked = rank_candidates(items, street_profile, LookContext(10000.0), no_jitter)
        assert [c.item.id for c in ranked] == ["tagged", "featured", "plain"]
        assert ranked[0].score >= ranked[1].score >= ranked[2].score
