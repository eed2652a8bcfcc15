"""Calculator modules for unit economics."""

from .number_parser import parse_number
from .records import (
    DUTY_FIXED,
    DUTY_PERCENT,
    DUTY_TYPES,
    ProfitMetrics,
    UnitInputs,
)
from .metrics_calculator import MetricsCalculator, compute_metrics
from .chart_series import ChartSlice, build_chart_series, is_chart_renderable, series_to_frame

__all__ = [
    "parse_number",
    "DUTY_FIXED",
    "DUTY_PERCENT",
    "DUTY_TYPES",
    "ProfitMetrics",
    "UnitInputs",
    "MetricsCalculator",
    "compute_metrics",
    "ChartSlice",
    "build_chart_series",
    "is_chart_renderable",
    "series_to_frame",
]
