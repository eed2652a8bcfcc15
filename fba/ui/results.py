"""
Results UI Component
====================

Summary metrics and detailed breakdown for the computed ProfitMetrics.

Every value goes through fba.ui.formatters, so NaN and infinite results
(unparseable input, zero net price, zero landed cost) show as the
placeholder glyph instead of breaking the page.
"""

from __future__ import annotations
from typing import List, Tuple
import math
import streamlit as st

from fba.calculators import ProfitMetrics
from services.settings import AppSettings
from .formatters import format_currency, format_number, format_percent


# ============================================================================
# ROW BUILDING
# ============================================================================

def build_result_rows(metrics: ProfitMetrics, currency_symbol: str = "€") -> List[Tuple[str, str]]:
    """
    Build the labelled, formatted result rows.

    Used by the detailed breakdown and by the exporters.

    Args:
        metrics: Computed metrics
        currency_symbol: Prefix for money values

    Returns:
        List of (label, formatted value) tuples in display order
    """
    def money(value: float) -> str:
        return format_currency(value, currency_symbol)

    return [
        ("Net selling price (excl. VAT)", money(metrics.net_selling_price)),
        ("Customs duty / unit", money(metrics.duty_amount_unit)),
        ("Landed cost / unit", money(metrics.landed_cost_unit)),
        ("Referral fee / unit", money(metrics.referral_fee_amount)),
        ("Amazon fees / unit", money(metrics.amazon_fees)),
        ("Total cost / unit", money(metrics.total_cost_unit)),
        ("Profit before marketing / unit", money(metrics.profit_pre_marketing)),
        ("Marketing cost / unit", money(metrics.marketing_cost_unit)),
        ("Profit after marketing / unit", money(metrics.profit_post_marketing)),
        ("Margin", format_percent(metrics.margin)),
        ("ROI", format_percent(metrics.roi)),
        ("Monthly profit", money(metrics.total_monthly_profit)),
    ]


# ============================================================================
# RESULTS DISPLAY
# ============================================================================

def render_results(metrics: ProfitMetrics, settings: AppSettings) -> None:
    """
    Render summary metrics and the detailed breakdown.

    Shows:
    - First row: net price, landed cost, Amazon fees
    - Second row: profit per unit, margin, ROI, monthly profit
    - Expander with every result row
    """
    cur = settings.currency_symbol

    st.subheader("Results")

    r1c1, r1c2, r1c3 = st.columns(3)
    with r1c1:
        st.metric(f"Net Price ({cur})", format_number(metrics.net_selling_price))
    with r1c2:
        st.metric(f"Landed Cost ({cur})", format_number(metrics.landed_cost_unit))
    with r1c3:
        st.metric(f"Amazon Fees ({cur})", format_number(metrics.amazon_fees))

    r2c1, r2c2, r2c3, r2c4 = st.columns(4)
    with r2c1:
        st.metric(f"Profit / unit ({cur})", format_number(metrics.profit_post_marketing))
    with r2c2:
        st.metric("Margin", format_percent(metrics.margin))
    with r2c3:
        st.metric("ROI", format_percent(metrics.roi))
    with r2c4:
        st.metric(f"Monthly Profit ({cur})", format_number(metrics.total_monthly_profit))

    if not math.isfinite(metrics.profit_post_marketing):
        st.caption("Some inputs could not be read as numbers. Check for extra decimal separators.")

    with st.expander("📊 Detailed Breakdown"):
        st.write(dict(build_result_rows(metrics, cur)))
