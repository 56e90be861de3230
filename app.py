# app.py

import streamlit as st

from ui.pages.dashboard_page import render_dashboard_page
from ui.sidebar import render_sidebar

st.set_page_config(
    page_title="COVID-19 у Єні",
    layout="wide",
)

params = render_sidebar()
render_dashboard_page(params)
