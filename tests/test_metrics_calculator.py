"""Tests for the metrics engine."""

import math
from dataclasses import fields

import pytest

from fba.calculators import (
    DUTY_FIXED,
    DUTY_PERCENT,
    MetricsCalculator,
    ProfitMetrics,
    UnitInputs,
    compute_metrics,
)


def _same(a: float, b: float) -> bool:
    """Equality that treats NaN as equal to NaN."""
    return (math.isnan(a) and math.isnan(b)) or a == b


@pytest.fixture
def zero_vat_inputs():
    return UnitInputs(
        selling_price_gross="100",
        vat_rate="0",
        unit_product_cost="50",
        transport_cost_unit="0",
        duty_type=DUTY_PERCENT,
        customs_duty_percent="0",
        fba_fee="0",
        referral_fee_rate="0",
        other_costs_unit="0",
        marketing_spend_rate="0",
        monthly_sales_units="10",
    )


@pytest.fixture
def full_inputs():
    return UnitInputs(
        selling_price_gross="119",
        vat_rate="19",
        unit_product_cost="30",
        transport_cost_unit="2",
        duty_type=DUTY_PERCENT,
        customs_duty_percent="10",
        customs_duty_fixed="999",
        fba_fee="5",
        referral_fee_rate="15",
        other_costs_unit="1",
        marketing_spend_rate="25",
        monthly_sales_units="100",
    )


class TestZeroVatScenario:
    """No VAT, no fees: the numbers are easy to check by hand."""

    def test_metrics(self, zero_vat_inputs):
        m = compute_metrics(zero_vat_inputs)

        assert m.net_selling_price == pytest.approx(100)
        assert m.landed_cost_unit == pytest.approx(50)
        assert m.amazon_fees == pytest.approx(0)
        assert m.profit_pre_marketing == pytest.approx(50)
        assert m.profit_post_marketing == pytest.approx(50)
        assert m.margin == pytest.approx(50)
        assert m.roi == pytest.approx(100)
        assert m.total_monthly_profit == pytest.approx(500)


class TestFullScenario:
    """All inputs filled in."""

    def test_step_by_step(self, full_inputs):
        m = compute_metrics(full_inputs)

        assert m.net_selling_price == pytest.approx(100)        # 119 / 1.19
        assert m.referral_fee_amount == pytest.approx(15)       # 15% of 100
        assert m.duty_amount_unit == pytest.approx(3)           # 10% of 30
        assert m.landed_cost_unit == pytest.approx(35)          # 30 + 2 + 3
        assert m.amazon_fees == pytest.approx(20)               # 15 + 5
        assert m.total_cost_unit == pytest.approx(56)           # 35 + 20 + 1
        assert m.profit_pre_marketing == pytest.approx(44)
        assert m.marketing_cost_unit == pytest.approx(11)       # 25% of 44
        assert m.profit_post_marketing == pytest.approx(33)
        assert m.margin == pytest.approx(33)
        assert m.roi == pytest.approx(33 / 35 * 100)
        assert m.total_monthly_profit == pytest.approx(3300)

    def test_calculator_class_matches_function(self, full_inputs):
        assert MetricsCalculator.calculate(full_inputs) == compute_metrics(full_inputs)

    def test_comma_decimals(self, full_inputs):
        m = compute_metrics(full_inputs.replace(selling_price_gross="59,50", vat_rate="19"))
        assert m.net_selling_price == pytest.approx(50)


class TestDuty:
    """Percent vs fixed customs duty."""

    def test_fixed_duty_ignores_percent_field(self):
        inputs = UnitInputs(
            unit_product_cost="10",
            duty_type=DUTY_FIXED,
            customs_duty_fixed="2",
            customs_duty_percent="50",
        )
        m = compute_metrics(inputs)

        assert m.duty_amount_unit == 2
        assert m.landed_cost_unit == pytest.approx(12)

    def test_fixed_duty_ignores_garbage_percent_field(self):
        inputs = UnitInputs(
            unit_product_cost="10",
            duty_type=DUTY_FIXED,
            customs_duty_fixed="2",
            customs_duty_percent="1.2.3",
        )
        assert compute_metrics(inputs).duty_amount_unit == 2

    def test_percent_duty_ignores_fixed_field(self):
        inputs = UnitInputs(
            unit_product_cost="10",
            duty_type=DUTY_PERCENT,
            customs_duty_percent="5",
            customs_duty_fixed="1.2.3",
        )
        assert compute_metrics(inputs).duty_amount_unit == pytest.approx(0.5)

    @pytest.mark.parametrize("rate", ["", "0", "abc", "1.2.3", "."])
    def test_percent_duty_falsy_rate_is_zero(self, rate):
        """Zero, blank and unparseable rates give no duty rather than NaN."""
        inputs = UnitInputs(unit_product_cost="10", duty_type=DUTY_PERCENT, customs_duty_percent=rate)
        m = compute_metrics(inputs)

        assert m.duty_amount_unit == 0.0
        assert m.landed_cost_unit == pytest.approx(10)

    def test_fixed_duty_unparseable_propagates_nan(self):
        inputs = UnitInputs(
            selling_price_gross="119",
            unit_product_cost="10",
            duty_type=DUTY_FIXED,
            customs_duty_fixed="1.2.3",
        )
        m = compute_metrics(inputs)

        assert math.isnan(m.duty_amount_unit)
        assert math.isnan(m.landed_cost_unit)
        assert math.isnan(m.roi)
        # Unrelated fields are still computed
        assert m.net_selling_price == pytest.approx(100)
        assert m.referral_fee_amount == pytest.approx(15)

    def test_unknown_duty_type_uses_fixed_amount(self):
        inputs = UnitInputs(unit_product_cost="10", duty_type="other", customs_duty_fixed="4")
        assert compute_metrics(inputs).duty_amount_unit == 4


class TestMarketing:
    """Marketing spend only applies to positive profit."""

    def test_negative_profit_has_no_marketing_cost(self):
        inputs = UnitInputs(
            selling_price_gross="10",
            vat_rate="0",
            unit_product_cost="20",
            referral_fee_rate="0",
            marketing_spend_rate="50",
        )
        m = compute_metrics(inputs)

        assert m.profit_pre_marketing == pytest.approx(-10)
        assert m.marketing_cost_unit == 0
        assert m.profit_post_marketing == m.profit_pre_marketing
        assert m.margin == pytest.approx(-100)
        assert m.roi == pytest.approx(-50)

    def test_zero_profit_has_no_marketing_cost(self):
        inputs = UnitInputs(
            selling_price_gross="20",
            vat_rate="0",
            unit_product_cost="20",
            referral_fee_rate="0",
            marketing_spend_rate="50",
        )
        m = compute_metrics(inputs)

        assert m.marketing_cost_unit == 0
        assert m.profit_post_marketing == 0

    def test_nan_profit_keeps_marketing_nan(self):
        inputs = UnitInputs(selling_price_gross="1.2.3", marketing_spend_rate="10")
        m = compute_metrics(inputs)

        assert math.isnan(m.marketing_cost_unit)
        assert math.isnan(m.profit_post_marketing)


class TestNonFinite:
    """Division by zero and unparseable input never raise."""

    def test_zero_selling_price_gives_nan_margin(self):
        m = compute_metrics(UnitInputs(selling_price_gross="0"))

        assert m.net_selling_price == 0
        assert not math.isfinite(m.margin)
        assert not math.isfinite(m.roi)

    def test_zero_selling_price_with_cost_gives_negative_infinite_margin(self):
        m = compute_metrics(UnitInputs(selling_price_gross="0", unit_product_cost="5"))

        assert m.margin == -math.inf
        assert m.roi == pytest.approx(-100)

    def test_zero_landed_cost_gives_infinite_roi(self):
        m = compute_metrics(UnitInputs(selling_price_gross="10", vat_rate="0", referral_fee_rate="0"))

        assert m.roi == math.inf
        assert m.margin == pytest.approx(100)

    def test_default_inputs(self):
        m = compute_metrics(UnitInputs())

        assert m.net_selling_price == 0
        assert m.total_monthly_profit == 0
        assert math.isnan(m.margin)

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", ".", "0", "1e9", "12,5", None])
    def test_never_raises_and_returns_floats(self, value):
        raw = {name: value for name in UnitInputs.field_names() if name != "duty_type"}
        for duty_type in (DUTY_PERCENT, DUTY_FIXED):
            m = compute_metrics(UnitInputs.from_mapping({**raw, "duty_type": duty_type}))
            for f in fields(ProfitMetrics):
                assert isinstance(getattr(m, f.name), float)


class TestPurity:
    """Same inputs, same outputs."""

    @pytest.mark.parametrize("gross", ["119", "0", "1.2.3"])
    def test_idempotent(self, full_inputs, gross):
        inputs = full_inputs.replace(selling_price_gross=gross)
        first = compute_metrics(inputs).to_dict()
        second = compute_metrics(inputs).to_dict()

        assert first.keys() == second.keys()
        assert all(_same(first[k], second[k]) for k in first)

    def test_inputs_not_mutated(self, full_inputs):
        before = full_inputs.to_dict()
        compute_metrics(full_inputs)
        assert full_inputs.to_dict() == before
