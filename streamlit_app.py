# streamlit_app.py
import logging

import streamlit as st

from rasi_charts import ChartError, ChartRequest, render_chart
from rasi_charts.config import get_settings
from rasi_charts.registry import PLANET_ABBREVIATIONS, SIGN_NAMES, SPECIAL_LAGNA_ABBREVIATIONS, UPAGRAHA_ABBREVIATIONS
from rasi_charts.surface import SURFACES

logging.basicConfig(level=get_settings().log_level)

st.set_page_config(page_title="Rasi Chart Preview", layout="centered")

st.title("Rasi Chart (North & South Indian)")

NOT_PLACED = "-"
PLANETS = [p for p in PLANET_ABBREVIATIONS if p != "lagna"]
SIGN_CHOICES = [NOT_PLACED] + [s.title() for s in SIGN_NAMES]

with st.form("chart_form"):
    col1, col2 = st.columns(2)
    with col1:
        chart_style = st.selectbox("Chart style", ["north", "south"],
                                   format_func=lambda s: "North Indian" if s == "north" else "South Indian")
        lagna = st.selectbox("Lagna", SIGN_CHOICES[1:])
    with col2:
        center_text = st.text_area("Center text (South Indian only)", "")

    st.subheader("Planets")
    planets = {}
    for name in PLANETS:
        c1, c2, c3 = st.columns([2, 1, 1])
        with c1:
            sign = st.selectbox(name.title(), SIGN_CHOICES, key=f"sign_{name}")
        with c2:
            retro = st.checkbox("Retrograde", key=f"retro_{name}")
        with c3:
            combust = st.checkbox("Combust", key=f"combust_{name}")
        if sign != NOT_PLACED:
            planets[name] = {"rashi": sign, "is_retrograde": retro, "is_combust": combust}

    with st.expander("Upagrahas and special lagnas"):
        for name in list(UPAGRAHA_ABBREVIATIONS) + list(SPECIAL_LAGNA_ABBREVIATIONS):
            sign = st.selectbox(name.replace("_", " ").title(), SIGN_CHOICES, key=f"sign_{name}")
            if sign != NOT_PLACED:
                planets[name] = {"rashi": sign, "upagraha": name in UPAGRAHA_ABBREVIATIONS}

    submit = st.form_submit_button("Draw chart")

if submit:
    payload = {
        "chart_type": chart_style,
        "lagna": {"rashi": lagna},
        "planets": planets,
        "center_text": center_text,
    }
    try:
        png = render_chart(ChartRequest.from_dict(payload))
    except ChartError as e:
        st.error(f"Could not draw chart: {e}")
    else:
        st.image(png, width=800)
        st.download_button("Download PNG", png, file_name=f"rasi_{chart_style}.png", mime=SURFACES["png"].media_type)
        with st.expander("Request payload"):
            st.json(payload)
