"""Excel export functionality."""

from __future__ import annotations
from io import BytesIO
from datetime import datetime
from typing import List, Tuple, Any
import logging

import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)

SHEET_NAME = "Profit"


def build_excel_bytes(export_rows: List[Tuple[str, Any]]) -> bytes:
    """Write the rows into a two-column worksheet and return the .xlsx bytes."""
    buf = BytesIO()
    rows = [
        {"Item": k, "Value": ("" if v in (None, "") else v)}
        for k, v in export_rows
    ]

    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = pd.DataFrame(rows, columns=["Item", "Value"])
        df.to_excel(xw, index=False, sheet_name=SHEET_NAME)
        ws = xw.sheets[SHEET_NAME]
        ws.set_column(0, 0, 36)
        ws.set_column(1, 1, 22)

    return buf.getvalue()


def export_filename(title: str, now: datetime) -> str:
    """'FBA Profit Calculator' -> 'fba_profit_calculator_20250101-120000.xlsx'"""
    calc_id = now.strftime("%Y%m%d-%H%M%S")
    stem = title.replace(" / ", "_").replace(" ", "_").lower()
    return f"{stem}_{calc_id}.xlsx"


def export_to_excel(
    export_rows: List[Tuple[str, Any]],
    title: str
) -> None:
    """Render Excel download button."""
    try:
        data = build_excel_bytes(export_rows)
    except ModuleNotFoundError as e:
        logger.warning("Excel export unavailable: %s", e)
        st.caption("Install xlsxwriter for Excel export.")
        return

    st.download_button(
        "Download Excel",
        data=data,
        file_name=export_filename(title, datetime.now()),
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
