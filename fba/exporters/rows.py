"""Rows shared by the Excel and print exports."""

from __future__ import annotations
from typing import List, Tuple

from fba.calculators import DUTY_FIXED, ProfitMetrics, UnitInputs
from fba.ui.results import build_result_rows


def build_export_rows(
    inputs: UnitInputs,
    metrics: ProfitMetrics,
    currency_symbol: str = "€",
) -> List[Tuple[str, str]]:
    """
    Build export data rows for Excel and print.

    Inputs are exported as typed (raw text); only the active duty field is
    included. Results use the same formatting as the results panel.
    """
    cur = currency_symbol

    if inputs.duty_type == DUTY_FIXED:
        duty_row = (f"Customs duty, fixed ({cur} / unit)", inputs.customs_duty_fixed)
    else:
        duty_row = ("Customs duty (%)", inputs.customs_duty_percent)

    export_rows: List[Tuple[str, str]] = [("— Inputs —", "")]
    export_rows.extend([
        (f"Selling price incl. VAT ({cur})", inputs.selling_price_gross),
        ("VAT rate (%)", inputs.vat_rate),
        (f"Product cost ({cur} / unit)", inputs.unit_product_cost),
        (f"Transport cost ({cur} / unit)", inputs.transport_cost_unit),
        duty_row,
        (f"FBA fee ({cur} / unit)", inputs.fba_fee),
        ("Referral fee (%)", inputs.referral_fee_rate),
        (f"Other costs ({cur} / unit)", inputs.other_costs_unit),
        ("Marketing spend (% of profit)", inputs.marketing_spend_rate),
        ("Monthly sales (units)", inputs.monthly_sales_units),
    ])

    export_rows.append(("", ""))
    export_rows.append(("— Results —", ""))
    export_rows.extend(build_result_rows(metrics, cur))

    return export_rows
