"""Light/dark theme flag kept in session state."""

from __future__ import annotations
import streamlit as st

THEME_KEY = "theme"

_DARK_CSS = """
<style>
.stApp { background-color: #0f172a; color: #e2e8f0; }
.stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p { color: #e2e8f0; }
[data-testid="stMetricValue"] { color: #f8fafc; }
</style>
"""

_LIGHT_CSS = """
<style>
.stApp { background-color: #ffffff; color: #0f172a; }
</style>
"""


def init_theme(default_theme: str = "light") -> str:
    """Set the theme once per session from the configured default."""
    st.session_state.setdefault(THEME_KEY, default_theme)
    return st.session_state[THEME_KEY]


def toggle_theme() -> None:
    current = st.session_state.get(THEME_KEY, "light")
    st.session_state[THEME_KEY] = "light" if current == "dark" else "dark"


def plotly_template(theme: str) -> str:
    return "plotly_dark" if theme == "dark" else "plotly_white"


def apply_theme(theme: str) -> None:
    st.markdown(_DARK_CSS if theme == "dark" else _LIGHT_CSS, unsafe_allow_html=True)
