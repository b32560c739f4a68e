from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from app_logging import get_logger
from assumptions import Assumptions, DEFAULT_ASSUMPTIONS

log = get_logger("sizing")


@dataclass
class SolarInputs:
    monthly_bill: Optional[float] = None
    sunlight_hours: Optional[float] = None
    cost_per_watt: Optional[float] = DEFAULT_ASSUMPTIONS.default_cost_per_watt


@dataclass(frozen=True)
class SolarEstimate:
    system_size_kw: float = 0.0
    panel_count: int = 0
    total_cost: float = 0.0

    @classmethod
    def empty(cls) -> "SolarEstimate":
        return cls()

    @property
    def is_ready(self) -> bool:
        return self.system_size_kw > 0


def to_amount(value) -> Optional[float]:
    """Normalise a raw form value. Blank, non-numeric and non-finite input is unset."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def derive_outputs(inputs: SolarInputs, assumptions: Assumptions = DEFAULT_ASSUMPTIONS) -> SolarEstimate:
    bill = inputs.monthly_bill
    hours = inputs.sunlight_hours
    if bill is None or hours is None or bill <= 0 or hours <= 0:
        return SolarEstimate.empty()

    cost_per_watt = inputs.cost_per_watt
    if cost_per_watt is None or cost_per_watt < 0:
        cost_per_watt = assumptions.default_cost_per_watt

    size_kw = bill / (hours * assumptions.days_per_month * assumptions.tariff_per_kwh)
    watts = size_kw * 1000
    total_cost = watts * cost_per_watt
    if not (math.isfinite(size_kw) and math.isfinite(total_cost)):
        log.warning("Non-finite estimate for bill=%s sunlight=%s, showing no estimate", bill, hours)
        return SolarEstimate.empty()

    panels = math.ceil(watts / assumptions.panel_wattage)
    log.debug(
        "bill=%s sunlight=%s cost_per_watt=%s -> %.4f kW, %d panels, cost %.2f",
        bill, hours, cost_per_watt, size_kw, panels, total_cost,
    )
    return SolarEstimate(system_size_kw=size_kw, panel_count=panels, total_cost=total_cost)


def estimate(monthly_bill, sunlight_hours, cost_per_watt=DEFAULT_ASSUMPTIONS.default_cost_per_watt,
             assumptions: Assumptions = DEFAULT_ASSUMPTIONS) -> SolarEstimate:
    inputs = SolarInputs(
        monthly_bill=to_amount(monthly_bill),
        sunlight_hours=to_amount(sunlight_hours),
        cost_per_watt=to_amount(cost_per_watt),
    )
    return derive_outputs(inputs, assumptions)
