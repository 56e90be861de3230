from __future__ import annotations

import streamlit as st

from core.config import CFG
from core.errors import DataFetchError, DatasetValidationError
from core.logging import get_logger
from ui.components.charts import (
    build_bar_figure,
    build_cases_recovered_figure,
    build_incidence_figure,
    build_line_figure,
    build_model_figure,
    render_figure,
)
from ui.components.metrics import render_model_summary, render_recovery_lag
from ui.components.tables import render_data_table
from ui.sidebar import DashboardParams
from ui.state import get_dataset
from use_cases.derive_series import DeriveSeriesInput, derive_series_uc
from use_cases.fit_model import FitModelInput, fit_model_uc

logger = get_logger(__name__)


def render_dashboard_page(params: DashboardParams) -> None:
    st.title("Розвиток пандемії Sars-CoV-2 у місті Єна")

    # ---------- raw data ----------
    st.header("Вихідні дані")
    try:
        with st.spinner("Завантаження даних..."):
            ds = get_dataset()
    except DataFetchError as e:
        st.error(f"Помилка завантаження даних: {e}")
        st.stop()
    except DatasetValidationError as e:
        if e.missing_fields:
            st.error("Некоректний датасет.")
            st.markdown("**Відсутні обовʼязкові поля:**")
            st.code(", ".join(e.missing_fields))
        else:
            st.error(f"Некоректний датасет: {e}")
        st.stop()

    if ds.last_update is not None:
        st.markdown(f"Останнє оновлення даних: **{ds.last_update:%Y %b %d, %H:%M}**")
    with st.expander("Колонки джерела"):
        st.code(", ".join(ds.raw_columns))

    table = ds.table
    if len(table) == 0:
        st.warning("Замало даних для побудови щоденного ряду.")
        return

    # ---------- resampled ----------
    st.header("Дані з рівномірним кроком в один день")
    render_data_table(table)

    st.subheader("Загальна кількість випадків")
    render_figure(build_line_figure(table, "cases", "Загальна кількість випадків"))

    derived = derive_series_uc(
        table,
        DeriveSeriesInput(
            incidence_days=params.incidence_days,
            population=CFG.population,
            norm_incidence=params.norm_incidence,
            norm_incidence_days=params.norm_incidence_days,
            recovered_lead=params.recovered_lead,
            max_recovery_lag=CFG.max_recovery_lag,
        ),
    )

    st.subheader("Випадки та одужання")
    render_figure(build_cases_recovered_figure(table, derived.recovered_lead, params.recovered_lead))
    render_recovery_lag(derived.recovery_lag)

    st.subheader("Померлі")
    render_figure(build_line_figure(table, "dead", "Померлі"))

    st.subheader("Нові випадки за день")
    render_figure(build_bar_figure(table, "new_cases", "Нові випадки за день"))

    st.subheader("Активні випадки")
    render_figure(build_line_figure(table, "active", "Активні випадки"))

    st.subheader(f"{params.incidence_days}-денна інцидентність на 100 000 мешканців")
    if len(derived.incidence) == 0:
        st.info("Період інцидентності довший за наявні дані.")
    else:
        render_figure(build_incidence_figure(derived.incidence, params.incidence_days))

    # ---------- exponential model ----------
    st.header("Експоненційна модель")
    out = fit_model_uc(
        table,
        FitModelInput(series=params.modelled_series, t0=params.fit_start, t1=params.fit_end),
    )
    render_model_summary(out)
    render_figure(build_model_figure(table, params.modelled_series, out.model))
