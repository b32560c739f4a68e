import streamlit as st

from app_logging import setup_logging
from assumptions import DEFAULT_ASSUMPTIONS
from formatting import format_inr, format_kw, format_panels
from sensitivity import plot_sunlight_sweep, sunlight_sweep
from sizing import estimate

st.set_page_config(page_title="Simple Solar Calculator", layout="wide")


@st.cache_resource(show_spinner=False)
def _logger():
    return setup_logging(quiet=True)


log = _logger()

st.title("☀️ Simple Solar Calculator")
st.caption("Calculate your solar system requirements")

panel_w = DEFAULT_ASSUMPTIONS.panel_wattage

# --- Inputs ---
st.subheader("Enter Your Details")
monthly_bill = st.number_input(
    "Monthly Electricity Bill (₹) *",
    min_value=0.0, value=None, step=100.0, placeholder="e.g., 5000", key="monthly_bill",
    help="Your average monthly electricity bill in rupees",
)
sunlight_hours = st.number_input(
    "Average Sunlight Hours Per Day (hrs) *",
    min_value=0.0, value=None, step=0.1, placeholder="e.g., 5.5", key="sunlight_hours",
    help="Peak sunlight hours in your location (typically 4-6 hours in India)",
)
cost_per_watt = st.number_input(
    "Cost Per Watt (₹/W, optional)",
    min_value=0.0, value=DEFAULT_ASSUMPTIONS.default_cost_per_watt, step=1.0, key="cost_per_watt",
    help=f"Default is {format_inr(DEFAULT_ASSUMPTIONS.default_cost_per_watt)} per watt (including installation)",
)
st.info(f"**Note:** Panel wattage is set to {panel_w:g} W per panel (standard size)")

# Streamlit reruns this script on every input change, so the estimate always tracks the latest values.
result = estimate(monthly_bill, sunlight_hours, cost_per_watt)

# --- Estimate ---
st.subheader("Your Solar System Estimate")
if result.is_ready:
    col1, col2, col3 = st.columns(3)
    col1.metric("⚡ System Size", format_kw(result.system_size_kw))
    col2.metric("📦 Solar Panels Needed", format_panels(result.panel_count))
    col2.caption(f"@ {panel_w:g}W each")
    col3.metric("💰 Estimated Total Cost", format_inr(result.total_cost))

    st.success(
        f"✨ A **{format_kw(result.system_size_kw)}** system can save around "
        f"**{format_inr(monthly_bill)}** per month."
    )
    st.caption("Start reducing your electricity bills and contribute to a greener future!")

    with st.expander("What if my sunlight hours differ?"):
        df = sunlight_sweep(monthly_bill, cost_per_watt)
        st.dataframe(df.style.format({
            "Sunlight (hrs)": "{:.1f}",
            "System Size (kW)": "{:.2f}",
            "Cost (₹)": format_inr,
        }))
        st.pyplot(plot_sunlight_sweep(df, current_hours=sunlight_hours))
else:
    st.info("👆 Fill in the required fields above to see your solar system estimate")

st.markdown("---")
st.caption("Built by **Direct Watts Interns**")
