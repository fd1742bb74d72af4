"""passcheck -- Streamlit web interface."""

import streamlit as st

from passcheck import evaluate
from passcheck.meter import MET_GLYPH, UNMET_GLYPH

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=32, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

SECURITY_TIPS = [
    "Use a unique password for each account",
    "Avoid common words and personal information",
    "Consider using a password manager",
    "Enable two-factor authentication when possible",
]

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Checker",
    page_icon="\U0001f6e1️",
    layout="centered",
)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_SHIELD} Password Checker</h1>',
    unsafe_allow_html=True,
)
st.caption("Test your password strength")

# ── Input ─────────────────────────────────────────────────────────────────

show = st.toggle("Show password", value=False)
password = st.text_input(
    "Enter Password",
    key="password",
    type="default" if show else "password",
    placeholder="Type your password…",
    autocomplete="off",
)

# Streamlit reruns this script on every change, so the assessment is
# always recomputed from the current input.
assessment = evaluate(password)

if password:
    st.markdown(
        f"**Strength:** <span style='color:{assessment.tier.color}'>"
        f"**{assessment.label}**</span>",
        unsafe_allow_html=True,
    )
    st.progress(assessment.score / 100)

    st.markdown("**Password Requirements:**")
    for c in assessment.criteria:
        if c.met:
            st.markdown(f"<span style='color:#15803d'>{MET_GLYPH} {c.label}</span>",
                        unsafe_allow_html=True)
        else:
            st.markdown(f"<span style='color:#475569'>{UNMET_GLYPH} {c.label}</span>",
                        unsafe_allow_html=True)

# ── Tips ──────────────────────────────────────────────────────────────────

st.info(
    "**Security Tips**\n\n" + "\n".join(f"- {tip}" for tip in SECURITY_TIPS),
    icon="ℹ️",
)
st.caption("Your password is never sent or stored anywhere")
