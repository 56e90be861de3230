from __future__ import annotations

import math
from typing import Optional

import streamlit as st

from use_cases.fit_model import FitModelOutput


def format_doubling_time(doubling_time: Optional[float]) -> str:
    if doubling_time is None:
        return "не визначено (немає росту)"
    return f"{doubling_time:.1f} дн."


def format_r2(r2: float) -> str:
    if math.isnan(r2):
        return "не визначено"
    return f"{r2:.4f}"


def render_model_summary(out: FitModelOutput) -> None:
    if not out.ok:
        st.warning(f"Неможливо побудувати модель: {out.error}")
        return

    model = out.model
    col1, col2, col3 = st.columns(3)
    col1.metric("Час подвоєння", format_doubling_time(model.doubling_time))
    col2.metric("R²", format_r2(model.r2))
    col3.metric("Точок у вікні", f"{model.n_points}")

    if model.is_growing:
        st.markdown(
            f"Модель показує, що у вибраному періоді числа **подвоюються кожні "
            f"{round(model.doubling_time)} дн.**"
        )
    else:
        st.markdown(
            "У вибраному періоді ряд **не зростає**, тому час подвоєння не визначений."
        )


def render_recovery_lag(lag: Optional[int]) -> None:
    if lag is None:
        return
    st.markdown(
        f"За мінімумом квадратичної різниці між кривими крива одужань відстає від "
        f"кривої випадків на **{lag} дн.** Це відповідає часу одужання **{lag} дн.**"
    )
