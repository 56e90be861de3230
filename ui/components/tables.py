from __future__ import annotations

import pandas as pd
import streamlit as st


COL_LABELS = {
    "time": "Час",
    "cases": "Випадки (всього)",
    "active": "Активні",
    "recovered": "Одужали",
    "new_cases": "Нові випадки",
    "dead": "Померлі",
}


def format_data_table(table: pd.DataFrame) -> pd.DataFrame:
    df = table.copy()
    df["time"] = pd.to_datetime(df["time"]).dt.strftime("%Y-%m-%d %H:%M")
    return df.rename(columns=COL_LABELS)


def render_data_table(table: pd.DataFrame) -> None:
    if table is None or len(table) == 0:
        st.info("Немає даних для відображення.")
        return
    st.dataframe(format_data_table(table), width='stretch', height=300, hide_index=True)
