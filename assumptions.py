from dataclasses import dataclass


@dataclass(frozen=True)
class Assumptions:
    panel_wattage: float = 350.0        # W per panel, not user editable
    tariff_per_kwh: float = 6.0         # ₹ per kWh, assumed average tariff
    days_per_month: int = 30
    default_cost_per_watt: float = 55.0  # ₹ per W, including installation


DEFAULT_ASSUMPTIONS = Assumptions()
