"""Input and output records for the metrics engine."""

from __future__ import annotations
from dataclasses import dataclass, asdict, fields, replace as dc_replace
from typing import Any, Dict, Mapping, Optional

DUTY_PERCENT = "percent"
DUTY_FIXED = "fixed"
DUTY_TYPES = (DUTY_PERCENT, DUTY_FIXED)

DEFAULT_VAT_RATE = "19"
DEFAULT_REFERRAL_FEE_RATE = "15"

# camelCase keys as sent by form-like collaborators
_CAMEL_KEYS = {
    "sellingPriceGross": "selling_price_gross",
    "vatRate": "vat_rate",
    "unitProductCost": "unit_product_cost",
    "transportCostUnit": "transport_cost_unit",
    "dutyType": "duty_type",
    "customsDutyPercent": "customs_duty_percent",
    "customsDutyFixed": "customs_duty_fixed",
    "fbaFee": "fba_fee",
    "referralFeeRate": "referral_fee_rate",
    "otherCostsUnit": "other_costs_unit",
    "marketingSpendRate": "marketing_spend_rate",
    "monthlySalesUnits": "monthly_sales_units",
}


@dataclass(frozen=True)
class UnitInputs:
    """Raw per-unit inputs exactly as typed into the form."""

    selling_price_gross: str = ""
    vat_rate: str = DEFAULT_VAT_RATE
    unit_product_cost: str = ""
    transport_cost_unit: str = ""
    duty_type: str = DUTY_PERCENT
    customs_duty_percent: str = ""
    customs_duty_fixed: str = ""
    fba_fee: str = ""
    referral_fee_rate: str = DEFAULT_REFERRAL_FEE_RATE
    other_costs_unit: str = ""
    marketing_spend_rate: str = ""
    monthly_sales_units: str = ""

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        defaults: Optional["UnitInputs"] = None,
    ) -> "UnitInputs":
        """
        Build inputs from a dict keyed by snake_case or camelCase names.

        Unknown keys are ignored, missing keys keep the default value and
        None becomes an empty string.
        """
        base = defaults or cls()
        known = set(cls.field_names())
        values: Dict[str, str] = {}
        for key, value in (mapping or {}).items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                continue
            values[name] = "" if value is None else str(value)
        return dc_replace(base, **values)

    def replace(self, **changes: str) -> "UnitInputs":
        """Return a copy with the given fields changed."""
        return dc_replace(self, **changes)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ProfitMetrics:
    """Per-unit and monthly profitability derived from UnitInputs."""

    net_selling_price: float
    duty_amount_unit: float
    landed_cost_unit: float
    referral_fee_amount: float
    amazon_fees: float
    total_cost_unit: float
    profit_pre_marketing: float
    marketing_cost_unit: float
    profit_post_marketing: float
    margin: float
    roi: float
    total_monthly_profit: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
