"""
Streamlit entrypoint for the FBA Profit Calculator.
- Inputs on the left, results and breakdown chart on the right
- Everything is recomputed from the raw inputs on every rerun
- Sidebar holds the theme toggle and the export buttons
"""

from __future__ import annotations

import sys
import logging
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from fba.calculators import compute_metrics
from fba.exporters import build_export_rows, export_to_excel, export_to_print
from fba.ui import (
    apply_theme,
    init_theme,
    render_breakdown_chart,
    render_input_form,
    render_results,
    toggle_theme,
)
from services.logging_config import setup_logging
from services.settings import get_settings

# -----------------------------------------------------------------------------
# Settings & logging
# -----------------------------------------------------------------------------
settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger("app")

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title=settings.app_title, page_icon="📦", layout="wide")

theme = init_theme(settings.default_theme)
apply_theme(theme)

# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------
st.sidebar.markdown("### Display")
st.sidebar.button(
    "🌙 Dark mode" if theme == "light" else "☀️ Light mode",
    on_click=toggle_theme,
    use_container_width=True,
    key="theme_toggle_btn",
)

# -----------------------------------------------------------------------------
# Calculator
# -----------------------------------------------------------------------------
st.title(f"📦 {settings.app_title}")
st.caption("Per-unit profitability for marketplace sellers. All amounts per unit unless noted.")
st.markdown("---")

col_inputs, col_results = st.columns([1, 1], gap="large")

with col_inputs:
    inputs = render_input_form(settings)

metrics = compute_metrics(inputs)
logger.debug("Recomputed metrics: %s", metrics)

with col_results:
    render_results(metrics, settings)
    render_breakdown_chart(inputs, metrics, theme)

# -----------------------------------------------------------------------------
# Export
# -----------------------------------------------------------------------------
st.sidebar.markdown("---")
st.sidebar.markdown("### Save / Export")
export_rows = build_export_rows(inputs, metrics, settings.currency_symbol)
with st.sidebar:
    export_to_excel(export_rows, settings.app_title)
    export_to_print(export_rows, settings.app_title)
