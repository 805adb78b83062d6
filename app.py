from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

import streamlit as st

from components.look_handoff import cart_lines, share_summary
from components.product_catalog import load_catalog
from components.profile_builder import build_preference_profile
from components.ui_theme import (
    apply_theme,
    hero_block,
    look_price,
    render_stepper,
    section_header,
    style_tip,
    top_nav,
)
from config import (
    AI_DECIDE,
    BUDGET_OPTIONS,
    COLOR_MOODS,
    GENDERS,
    GIFT_OCCASIONS,
    OCCASIONS,
    PURPOSES,
    RECIPIENTS,
    STYLES,
    configure_logging,
    get_settings,
)
from data.mock_data import MOCK_ANSWERS
from scoring.recommendation_engine import (
    generate_looks,
    make_rng,
    regenerate_looks,
    shown_ids,
    stylist_message,
)

configure_logging()

st.set_page_config(page_title="AI Dresser", page_icon="👗", layout="wide")
apply_theme()
st.markdown(
    """
    <style>
      [data-testid="stSidebarNav"] { display: none !important; }
      section[data-testid="stSidebar"] { display: none !important; }
      header[data-testid="stHeader"] { display: none !important; }
    </style>
    """,
    unsafe_allow_html=True,
)

for key, default in {
    "answers": {},
    "_looks": [],
    "_shown_ids": frozenset(),
    "_pool_reset": False,
    "_catalog_name": "",
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

base_dir = Path(__file__).resolve().parent


def _load_catalog():
    override = get_settings().catalog_path
    return load_catalog(base_dir, override=Path(override) if override else None)


def _select(label: str, options: dict, current: str, **kwargs) -> str:
    keys = list(options)
    index = keys.index(current) if current in keys else 0
    return st.selectbox(label, keys, index=index, format_func=lambda k: options[k], **kwargs)


top_nav()
render_stepper(bool(st.session_state.answers), bool(st.session_state._looks))
hero_block()

section_header("1) Style Quiz", "Tell us who the looks are for and what you're dressing for.")

previous = st.session_state.answers
sample = st.selectbox(
    "Start from a sample shopper (optional)",
    ["(none)"] + [a["name"] for a in MOCK_ANSWERS],
)
if sample != "(none)":
    previous = next(a for a in MOCK_ANSWERS if a["name"] == sample)

purpose = st.radio(
    "Who are you shopping for?",
    PURPOSES,
    index=1 if previous.get("purpose") == "gift" else 0,
    format_func=lambda p: "Myself" if p == "personal" else "A gift for someone",
    horizontal=True,
)

recipient, relationship = "", ""
if purpose == "gift":
    c_r1, c_r2 = st.columns(2)
    with c_r1:
        recipient = st.text_input("Recipient's name", value=previous.get("recipient", ""))
    with c_r2:
        relationship = _select("Relationship", RECIPIENTS, previous.get("relationship", "partner"))

gender_options = dict(zip(GENDERS, ("Men", "Women", "Unisex / Any")))
gender = _select("Shopping for", gender_options, previous.get("gender", "unisex"))

col_a, col_b = st.columns(2)
with col_a:
    style = _select("Style", STYLES, previous.get("style", "casual-street"))
with col_b:
    occasion_table = GIFT_OCCASIONS if purpose == "gift" else OCCASIONS
    occasion = _select("Occasion", occasion_table, previous.get("occasion", ""))

col_c, col_d = st.columns(2)
with col_c:
    budget = _select("Budget per look", BUDGET_OPTIONS, str(previous.get("budget", "5000")))
with col_d:
    color = _select("Color mood", COLOR_MOODS, previous.get("color", AI_DECIDE))

sizes = {}
with st.expander("Sizes (optional)", expanded=bool(previous.get("sizes"))):
    prev_sizes = previous.get("sizes") or {}
    s1, s2, s3 = st.columns(3)
    with s1:
        sizes["top"] = st.text_input("Top", value=prev_sizes.get("top", ""), placeholder="e.g. M")
    with s2:
        sizes["bottom"] = st.text_input("Bottom", value=prev_sizes.get("bottom", ""), placeholder="e.g. 32")
    with s3:
        sizes["shoe"] = st.text_input("Shoe", value=prev_sizes.get("shoe", ""), placeholder="e.g. 9")

section_header("2) Your Looks", "Five complete outfits within your budget.")

c_go, c_new = st.columns(2)
with c_go:
    get_looks = st.button("Get My Looks", type="primary", use_container_width=True)
with c_new:
    new_looks = st.button(
        "Get New Looks",
        use_container_width=True,
        disabled=not st.session_state._looks,
    )

if get_looks or new_looks:
    st.session_state.answers = {
        "purpose": purpose,
        "gender": gender,
        "recipient": recipient,
        "relationship": relationship,
        "style": style,
        "occasion": occasion,
        "budget": budget,
        "color": color,
        "sizes": sizes,
    }
    profile = build_preference_profile(st.session_state.answers)
    catalog, catalog_path = _load_catalog()

    if new_looks:
        result = regenerate_looks(profile, catalog, st.session_state._shown_ids, rng=make_rng())
        st.session_state._looks = result.looks
        st.session_state._shown_ids = result.exclusion
        st.session_state._pool_reset = result.pool_reset
    else:
        looks = generate_looks(profile, catalog, rng=make_rng())
        st.session_state._looks = looks
        st.session_state._shown_ids = shown_ids(looks)
        st.session_state._pool_reset = False
    st.session_state._catalog_name = catalog_path.name

looks = st.session_state._looks
if st.session_state.answers and (looks or st.session_state._catalog_name):
    profile = build_preference_profile(st.session_state.answers)
    st.subheader(stylist_message(profile, looks))
    if st.session_state._pool_reset:
        st.info("You have seen everything that fits, so we started over with the full collection.")

    for look in looks:
        with st.container(border=True):
            head_l, head_r = st.columns([3, 1])
            with head_l:
                st.markdown(f"### {look.look_number}. {look.name}")
                st.caption(look.description)
            with head_r:
                look_price(look.total_price)

            cols = st.columns(len(look.items))
            for col, item in zip(cols, look.items):
                with col:
                    if item.image_url.startswith("http"):
                        st.image(item.image_url, use_container_width=True)
                    else:
                        st.info("Image coming soon")
                    st.markdown(f"**{item.product_name}**")
                    st.caption(f"{item.brand} · {item.category} · ₱{item.price:,.0f}")
                    st.write(item.styling_note)

            style_tip(look.style_tip)

            with st.expander("Add to cart / share", expanded=False):
                st.json(cart_lines(look))
                st.code(share_summary(look, f"/shared-look/{look.look_number}")["message"])

    st.caption(f"Catalog source: {st.session_state._catalog_name}")
