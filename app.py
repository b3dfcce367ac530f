import logging

import streamlit as st

from core.version import version_label
from ui.dti_form import render_dti_calculator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Debt-to-Income Ratio Calculator", page_icon="🏠", layout="centered")

st.caption(f"{version_label()} • Monthly figures • Good ≤36% • Fair ≤43% • Poor >43%")
render_dti_calculator()
