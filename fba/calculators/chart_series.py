"""Cost/profit split of the selling price for the breakdown chart."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

import pandas as pd

from .number_parser import parse_number
from .records import ProfitMetrics, UnitInputs


@dataclass(frozen=True)
class ChartSlice:
    label: str
    value: float


def build_chart_series(inputs: UnitInputs, metrics: ProfitMetrics) -> List[ChartSlice]:
    """
    Project the metrics onto the five chart segments.

    Other costs come straight from the raw input, everything else from the
    computed metrics.
    """
    return [
        ChartSlice("Landed Cost", metrics.landed_cost_unit),
        ChartSlice("Amazon Fees", metrics.amazon_fees),
        ChartSlice("Marketing", metrics.marketing_cost_unit),
        ChartSlice("Other Costs", parse_number(inputs.other_costs_unit)),
        ChartSlice("Profit", metrics.profit_post_marketing),
    ]


def is_chart_renderable(metrics: ProfitMetrics) -> bool:
    """A proportional chart needs a non-negative post-marketing profit."""
    return metrics.profit_post_marketing >= 0


def series_to_frame(series: List[ChartSlice]) -> pd.DataFrame:
    """
    Convert slices into a DataFrame with label, value and share (%) columns.

    Zero and non-finite slices are dropped since they have no visible share.
    """
    rows = [
        {"label": s.label, "value": float(s.value)}
        for s in series
        if math.isfinite(s.value) and s.value > 0
    ]
    df = pd.DataFrame(rows, columns=["label", "value"])
    total = df["value"].sum()
    df["share"] = (df["value"] / total * 100.0) if total > 0 else 0.0
    return df
