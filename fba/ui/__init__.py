"""UI components for the profit calculator."""

from .formatters import PLACEHOLDER, format_currency, format_number, format_percent
from .input_form import render_input_form
from .results import build_result_rows, render_results
from .breakdown_chart import render_breakdown_chart
from .theme import apply_theme, init_theme, toggle_theme

__all__ = [
    "PLACEHOLDER",
    "format_currency",
    "format_number",
    "format_percent",
    "render_input_form",
    "build_result_rows",
    "render_results",
    "render_breakdown_chart",
    "apply_theme",
    "init_theme",
    "toggle_theme",
]
