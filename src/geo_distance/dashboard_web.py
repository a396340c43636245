"""Streamlit form for geodesic vs. Euclidean distance."""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from geo_distance.calculator import DistanceCalculator
from geo_distance.config import LOG_FORMAT, LOG_LEVEL
from geo_distance.map_layers import build_globe_deck, build_map_figure
from geo_distance.presets import ORIGIN_LABEL, PRESETS, find_preset

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

INPUT_KEYS = ("lat1", "lon1", "lat2", "lon2")

# --- Page config ---
st.set_page_config(
    page_title="Geo Distance Calculator",
    page_icon="🌍",
    layout="wide",
)

st.markdown("""
<style>
    .results { background: #1a1d24; border-radius: 10px; padding: 15px; border-left: 4px solid #1e5aff; }
</style>
""", unsafe_allow_html=True)


# --- Session state ---
def _sync_inputs(calc: DistanceCalculator) -> None:
    """Push the calculator's pair into the input widgets."""
    for key, value in calc.pair.to_flat().items():
        st.session_state[key] = float(value)


if "calculator" not in st.session_state:
    st.session_state["calculator"] = DistanceCalculator()
    _sync_inputs(st.session_state["calculator"])

calc: DistanceCalculator = st.session_state["calculator"]


# --- Callbacks (run before the next rerun renders widgets) ---
def _on_calculate() -> None:
    calc.set_coordinates(*(st.session_state[k] for k in INPUT_KEYS))
    calc.recalculate()


def _on_reset() -> None:
    calc.reset()
    _sync_inputs(calc)


def _on_preset(name: str) -> None:
    calc.select_preset(name)
    _sync_inputs(calc)


# --- Header ---
st.title("Geo Distance Calculator")

# --- Inputs ---
in_cols = st.columns(4)
for col, key, label in zip(in_cols, INPUT_KEYS, ("Latitude 1", "Longitude 1", "Latitude 2", "Longitude 2")):
    col.number_input(label, key=key, format="%.4f", step=0.0001)

btn_col1, btn_col2, _ = st.columns([1, 1, 4])
btn_col1.button("Calculate Distance", on_click=_on_calculate, type="primary", width="stretch")
btn_col2.button("Reset", on_click=_on_reset, width="stretch")

preset_cols = st.columns(len(PRESETS))
for col, name in zip(preset_cols, PRESETS):
    col.button(name, on_click=_on_preset, args=(name,), width="stretch")

# --- Error ---
if calc.error:
    st.error(calc.error)

# --- Results ---
if calc.result is not None:
    res = calc.result
    st.subheader("Results")
    r1, r2, r3 = st.columns(3)
    r1.metric("Geodesic Distance", f"{res.geodesic_km:.2f} km")
    r2.metric("Euclidean Distance", f"{res.euclidean_km:.2f} km")
    r3.metric("Difference", f"{res.difference_km:.2f} km")

st.markdown("---")

# --- Globe + map ---
preset = find_preset(calc.pair)
origin_label = ORIGIN_LABEL if preset else "Origin"
destination_label = preset.destination_label if preset else "Destination"

col_globe, col_map = st.columns(2)

with col_globe:
    st.subheader("3D Globe View")
    st.pydeck_chart(build_globe_deck(calc.pair, origin_label, destination_label), height=500)

with col_map:
    st.subheader("2D Map")
    fig_map = build_map_figure(calc.pair, origin_label=origin_label, destination_label=destination_label)
    st.plotly_chart(fig_map, width="stretch", config={"scrollZoom": True})

# --- Why this matters ---
st.subheader("Why This Matters")
st.markdown(
    "The **Geodesic Distance** is used in real-world applications like aviation and navigation, "
    "where the Earth's curvature must be accounted for. The **Euclidean Distance** is a straight-line "
    "approximation through the Earth and is shorter, but it ignores the curvature. "
    "For large distances, the difference can be significant!"
)

# --- History + export ---
st.subheader("Distance History")

if len(calc.history):
    df = pd.DataFrame(calc.history.to_records())

    exp_col1, exp_col2, _ = st.columns([1, 1, 6])
    with exp_col1:
        st.download_button("Download CSV", df.to_csv(index=False), "distance_history.csv", "text/csv")
    with exp_col2:
        st.download_button(
            "Download JSON", df.to_json(orient="records"), "distance_history.json", "application/json",
        )

    display_df = pd.DataFrame({
        "Point 1": df.apply(lambda r: f"({r['lat1']}, {r['lon1']})", axis=1),
        "Point 2": df.apply(lambda r: f"({r['lat2']}, {r['lon2']})", axis=1),
        "Geodesic (km)": df["geodesic_km"],
        "Euclidean (km)": df["euclidean_km"],
        "Difference (km)": df["difference_km"],
    })
    st.dataframe(
        display_df,
        width="stretch",
        hide_index=True,
        column_config={
            "Geodesic (km)": st.column_config.NumberColumn(format="%.2f"),
            "Euclidean (km)": st.column_config.NumberColumn(format="%.2f"),
            "Difference (km)": st.column_config.NumberColumn(format="%.2f"),
        },
    )
else:
    st.info("No calculations yet.")
