"""
Input Form UI Component
=======================

Free-text inputs for the unit economics calculator.

Every numeric field is a plain text input so partially typed or
locale-formatted values ("12,5") reach the calculator unchanged. The raw
text lives in st.session_state under "inp_<field>" and is turned into a
UnitInputs record on every rerun.

Duty type is a radio; only the active duty field is shown.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging
import streamlit as st

from fba.calculators import DUTY_FIXED, DUTY_PERCENT, DUTY_TYPES, UnitInputs
from services.settings import AppSettings

logger = logging.getLogger(__name__)

KEY_PREFIX = "inp_"

DUTY_LABELS = {
    DUTY_PERCENT: "Percent of product cost",
    DUTY_FIXED: "Fixed amount per unit",
}


def _key(field: str) -> str:
    return f"{KEY_PREFIX}{field}"


def default_inputs(settings: AppSettings) -> UnitInputs:
    """Initial form values, with the configured default rates."""
    return UnitInputs(
        vat_rate=settings.default_vat_rate,
        referral_fee_rate=settings.default_referral_fee_rate,
    )


def init_form_state(settings: AppSettings) -> None:
    for field, value in default_inputs(settings).to_dict().items():
        st.session_state.setdefault(_key(field), value)


def reset_form_state(settings: AppSettings) -> None:
    """Restore every field to its default (used as a button callback)."""
    for field, value in default_inputs(settings).to_dict().items():
        st.session_state[_key(field)] = value
    logger.info("Inputs reset to defaults")


def read_form_state(settings: AppSettings) -> UnitInputs:
    """Collect the current raw values from session state."""
    raw: Dict[str, str] = {
        field: st.session_state.get(_key(field), "")
        for field in UnitInputs.field_names()
    }
    return UnitInputs.from_mapping(raw, defaults=default_inputs(settings))


# ============================================================================
# MAIN FORM
# ============================================================================

def render_input_form(settings: AppSettings) -> UnitInputs:
    """
    Render all input fields and return the current inputs.

    Args:
        settings: Application settings (default rates, currency symbol)

    Returns:
        UnitInputs built from the raw text in session state
    """
    init_form_state(settings)
    cur = settings.currency_symbol

    st.subheader("Inputs")

    _render_section("Selling price", [
        ("selling_price_gross", f"Selling price incl. VAT ({cur})", "Gross price the customer pays"),
        ("vat_rate", "VAT rate (%)", "Removed from the gross price"),
    ])

    _render_section("Product & import", [
        ("unit_product_cost", f"Product cost per unit ({cur})", None),
        ("transport_cost_unit", f"Transport cost per unit ({cur})", None),
    ])
    _render_duty_inputs(cur)

    _render_section("Amazon", [
        ("fba_fee", f"FBA fee per unit ({cur})", "Fulfilment fee, taken as-is"),
        ("referral_fee_rate", "Referral fee (%)", "Commission on the net selling price"),
    ])

    _render_section("Other", [
        ("other_costs_unit", f"Other costs per unit ({cur})", None),
        ("marketing_spend_rate", "Marketing spend (% of profit)", "Only charged against a positive profit"),
        ("monthly_sales_units", "Monthly sales (units)", None),
    ])

    st.button(
        "Reset inputs",
        on_click=reset_form_state,
        args=(settings,),
        key="reset_inputs_btn",
    )

    return read_form_state(settings)


def _render_section(title: str, row: List[Tuple[str, str, Optional[str]]]) -> None:
    st.markdown(f"**{title}**")
    cols = st.columns(len(row))
    for col, (field, label, help_text) in zip(cols, row):
        with col:
            st.text_input(label, key=_key(field), help=help_text)


def _render_duty_inputs(currency_symbol: str) -> None:
    """Duty type radio plus the single duty field that applies."""
    c1, c2 = st.columns(2)

    with c1:
        duty_type = st.radio(
            "Customs duty",
            options=list(DUTY_TYPES),
            format_func=lambda t: DUTY_LABELS.get(t, t),
            key=_key("duty_type"),
            horizontal=True,
        )

    with c2:
        if duty_type == DUTY_FIXED:
            st.text_input(f"Customs duty per unit ({currency_symbol})", key=_key("customs_duty_fixed"))
        else:
            st.text_input("Customs duty (%)", key=_key("customs_duty_percent"))
