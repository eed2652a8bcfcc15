"""Print/HTML export functionality."""

from __future__ import annotations
from datetime import datetime
from html import escape
from typing import List, Tuple, Any
import logging
import streamlit as st
import streamlit.components.v1 as components

logger = logging.getLogger(__name__)


def export_to_print(
    export_rows: List[Tuple[str, Any]],
    title: str
) -> None:
    """Render print button with HTML popup."""
    if st.button("Print", use_container_width=True, key="print_btn"):
        html = generate_print_html(export_rows, title, datetime.now())
        components.html(html, height=0)
        logger.info("Print view opened for %s", title)
        st.toast("Opening print dialog…", icon="🖨️")


def generate_print_html(
    rows: List[Tuple[str, Any]],
    title: str,
    now: datetime,
) -> str:
    """Generate HTML for printing."""
    rows_html = "".join(
        _section_row(k) if _is_section(k, v) else
        f"<tr><td>{escape(str(k))}</td><td style='text-align:right'>{'' if v in (None, '') else escape(str(v))}</td></tr>"
        for k, v in rows
    )

    return f"""
    <html>
      <head>
        <meta charset="utf-8" />
        <title>{escape(title)}</title>
        <style>
          body {{ font-family: Arial, sans-serif; padding: 18px; }}
          h1 {{ font-size: 18px; margin: 0 0 6px; }}
          .meta {{ color:#666; font-size: 12px; margin-bottom: 10px; }}
          table {{ width:100%; border-collapse:collapse; }}
          th, td {{ border:1px solid #ddd; padding:6px 8px; font-size:12px; }}
          th {{ background:#f5f5f5; text-align:left; }}
          td.section {{ background:#fafafa; font-weight:bold; }}
          @media print {{ @page {{ size: A4 portrait; margin: 12mm; }} }}
        </style>
      </head>
      <body>
        <h1>{escape(title)}</h1>
        <div class="meta">{now.strftime('%Y-%m-%d %H:%M')}</div>
        <table>
          <thead><tr><th>Item</th><th>Value</th></tr></thead>
          <tbody>{rows_html}</tbody>
        </table>
        <script>window.onload = () => window.print();</script>
      </body>
    </html>
    """


def _is_section(label: Any, value: Any) -> bool:
    text = str(label)
    return value in (None, "") and text.startswith("—") and text.endswith("—")


def _section_row(label: Any) -> str:
    return f"<tr><td class='section' colspan='2'>{escape(str(label).strip('— '))}</td></tr>"
