from __future__ import annotations

from html import escape

import streamlit as st


def apply_theme() -> None:
    st.markdown(
        """
        <style>
          @import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600&family=Cormorant+Garamond:wght@500;600;700&display=swap');

          :root {
            --bg: #f7f4ef;
            --surface: #fffdfa;
            --text: #1b1917;
            --muted: #6f6760;
            --line: #e6ddd2;
            --accent: #b8862f;
          }

          .stApp {
            background: var(--bg);
            color: var(--text);
            font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
          }

          .block-container { max-width: 920px; padding-top: 1rem; padding-bottom: 2rem; }

          .top-nav { border-bottom: 1px solid var(--line); padding: 0.45rem 0; margin-bottom: 0.9rem; }
          .brand-mark { font-family: 'Cormorant Garamond', Georgia, serif; font-size: 1.45rem; font-weight: 700; }

          .stepper { display: grid; grid-template-columns: repeat(2, 1fr); gap: 0.4rem; margin: 0.2rem 0 1rem 0; }
          .step { display: flex; flex-direction: column; align-items: center; gap: 0.24rem; color: var(--muted); font-size: 0.72rem; }
          .step .dot { width: 1.6rem; height: 1.6rem; border-radius: 50%; border: 1px solid var(--line);
                       display: flex; align-items: center; justify-content: center; background: var(--surface); }
          .step.active .dot { border-color: var(--accent); color: var(--accent); }
          .step.done .dot { background: var(--accent); border-color: var(--accent); color: #fff; }

          .hero-wrap { text-align: center; padding: 1.2rem 0 1.4rem 0; }
          .pill { display: inline-block; border: 1px solid var(--line); border-radius: 999px;
                  padding: 0.2rem 0.8rem; font-size: 0.75rem; color: var(--muted); }
          .display-serif { font-family: 'Cormorant Garamond', Georgia, serif; font-size: 2.4rem; line-height: 1.1; margin-top: 0.6rem; }
          .hero-sub { color: var(--muted); max-width: 560px; margin: 0.6rem auto 0 auto; }

          .section-card { border: 1px solid var(--line); border-radius: 14px; padding: 0.8rem 1rem;
                          background: var(--surface); margin: 1.2rem 0 0.6rem 0; }
          .section-title { font-weight: 600; }
          .section-hint { color: var(--muted); font-size: 0.85rem; }

          .look-price { font-family: 'Cormorant Garamond', Georgia, serif; font-size: 1.5rem; color: var(--accent); }
          .style-tip { border-left: 3px solid var(--accent); padding-left: 0.7rem; color: var(--muted); font-size: 0.9rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def top_nav() -> None:
    st.markdown(
        """
        <div class="top-nav">
          <div class="brand-mark">AI Dresser</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_stepper(quiz_done: bool, looks_done: bool) -> None:
    states = [("Style Quiz", quiz_done), ("Your Looks", looks_done)]
    active_idx = next((i for i, (_, done) in enumerate(states) if not done), len(states) - 1)

    bits = ["<div class='stepper'>"]
    for i, (label, done) in enumerate(states):
        cls = "done" if done else ("active" if i == active_idx else "")
        marker = "✓" if done else str(i + 1)
        bits.append(f"<div class='step {cls}'><div class='dot'>{marker}</div><div>{label}</div></div>")
    bits.append("</div>")
    st.markdown("".join(bits), unsafe_allow_html=True)


def hero_block() -> None:
    st.markdown(
        """
        <div class="hero-wrap">
          <div class="pill">Personal styling, head to toe</div>
          <div class="display-serif">Complete looks, <span style="color:#b8862f;">ready to shop</span></div>
          <div class="hero-sub">Answer a few questions and we'll put together five outfits that fit your style, occasion and budget.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def section_header(title: str, hint: str) -> None:
    st.markdown(
        f"""
        <div class="section-card">
          <div class="section-title">{escape(title)}</div>
          <div class="section-hint">{escape(hint)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def look_price(amount: float) -> None:
    st.markdown(f"<div class='look-price'>₱{amount:,.0f}</div>", unsafe_allow_html=True)


def style_tip(text: str) -> None:
    st.markdown(f"<div class='style-tip'>{escape(text)}</div>", unsafe_allow_html=True)
