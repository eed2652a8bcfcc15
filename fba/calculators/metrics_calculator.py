"""Unit economics calculator - Pure calculation logic without UI."""

from __future__ import annotations
import math

import numpy as np

from .number_parser import parse_number
from .records import DUTY_PERCENT, ProfitMetrics, UnitInputs


class MetricsCalculator:
    """
    Turns raw form inputs into per-unit profitability metrics.

    Every call recomputes everything from the inputs. Nothing is raised for
    bad input: unparseable values come out as NaN, divisions by zero as
    NaN or +/-inf, and only the fields that depend on them are affected.
    """

    @staticmethod
    def calculate(inputs: UnitInputs) -> ProfitMetrics:
        n = parse_number

        cost = n(inputs.unit_product_cost)

        net_selling_price = _divide(n(inputs.selling_price_gross), 1 + n(inputs.vat_rate) / 100)
        referral_fee_amount = net_selling_price * (n(inputs.referral_fee_rate) / 100)

        duty_amount_unit = MetricsCalculator.duty_amount(inputs, cost)

        landed_cost_unit = cost + n(inputs.transport_cost_unit) + duty_amount_unit
        amazon_fees = referral_fee_amount + n(inputs.fba_fee)
        total_cost_unit = landed_cost_unit + amazon_fees + n(inputs.other_costs_unit)

        profit_pre_marketing = net_selling_price - total_cost_unit
        # Marketing is only charged against a positive pre-marketing profit
        marketing_base = profit_pre_marketing
        if not math.isnan(marketing_base):
            marketing_base = max(marketing_base, 0.0)
        marketing_cost_unit = marketing_base * (n(inputs.marketing_spend_rate) / 100)
        profit_post_marketing = profit_pre_marketing - marketing_cost_unit

        margin = _divide(profit_post_marketing, net_selling_price) * 100
        roi = _divide(profit_post_marketing, landed_cost_unit) * 100
        total_monthly_profit = profit_post_marketing * n(inputs.monthly_sales_units)

        return ProfitMetrics(
            net_selling_price=net_selling_price,
            duty_amount_unit=duty_amount_unit,
            landed_cost_unit=landed_cost_unit,
            referral_fee_amount=referral_fee_amount,
            amazon_fees=amazon_fees,
            total_cost_unit=total_cost_unit,
            profit_pre_marketing=profit_pre_marketing,
            marketing_cost_unit=marketing_cost_unit,
            profit_post_marketing=profit_post_marketing,
            margin=margin,
            roi=roi,
            total_monthly_profit=total_monthly_profit,
        )

    @staticmethod
    def duty_amount(inputs: UnitInputs, unit_product_cost: float) -> float:
        """
        Per-unit customs duty for the active duty type.

        Percent mode treats a zero or unparseable rate as no duty at all.
        Fixed mode takes the fixed amount as-is, NaN included.
        """
        if inputs.duty_type == DUTY_PERCENT:
            rate = parse_number(inputs.customs_duty_percent) / 100
            if not rate or math.isnan(rate):
                return 0.0
            return unit_product_cost * rate
        return parse_number(inputs.customs_duty_fixed)


def compute_metrics(inputs: UnitInputs) -> ProfitMetrics:
    """Compute all profitability metrics for one set of form inputs."""
    return MetricsCalculator.calculate(inputs)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 is +/-inf, 0/0 and nan/0 are nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
