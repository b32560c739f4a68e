from __future__ import annotations

import numpy as np
import pandas as pd
from matplotlib.figure import Figure

from assumptions import Assumptions, DEFAULT_ASSUMPTIONS
from sizing import SolarInputs, derive_outputs

DEFAULT_HOURS = np.arange(3.0, 7.5, 0.5)


def sunlight_sweep(monthly_bill: float, cost_per_watt: float, hours=None,
                   assumptions: Assumptions = DEFAULT_ASSUMPTIONS) -> pd.DataFrame:
    """Recompute the estimate across a range of sunlight hours for a fixed bill."""
    hours = DEFAULT_HOURS if hours is None else np.asarray(hours, dtype=float)
    rows = []
    for h in hours:
        est = derive_outputs(SolarInputs(monthly_bill, float(h), cost_per_watt), assumptions)
        rows.append({
            "Sunlight (hrs)": float(h),
            "System Size (kW)": est.system_size_kw,
            "Panels": est.panel_count,
            "Cost (₹)": est.total_cost,
        })
    return pd.DataFrame(rows, columns=["Sunlight (hrs)", "System Size (kW)", "Panels", "Cost (₹)"])


def plot_sunlight_sweep(df: pd.DataFrame, current_hours: float | None = None):
    # not registered with pyplot, so page reruns never accumulate open figures
    fig = Figure(figsize=(8, 4))
    ax = fig.subplots()
    ax.plot(df["Sunlight (hrs)"], df["System Size (kW)"], marker="o")
    if current_hours:
        ax.axvline(current_hours, color="orange", linestyle="--", label=f"Your site ({current_hours:g} hrs)")
        ax.legend()
    ax.set_title("System Size vs Sunlight Hours")
    ax.set_xlabel("Sunlight Hours per Day")
    ax.set_ylabel("System Size (kW)")
    return fig
