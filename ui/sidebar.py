from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

import streamlit as st

from core.config import CFG
from domain.entities import SERIES_LABELS, SERIES_ORDER


@dataclass(frozen=True)
class DashboardParams:
    incidence_days: int
    norm_incidence: bool
    norm_incidence_days: int
    recovered_lead: int
    fit_start: datetime
    fit_end: datetime
    modelled_series: str


def _local_to_utc(dt: datetime) -> datetime:
    # вісь часу таблиці - naive UTC, тож локальні межі переводимо в UTC
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def fit_window_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    # початок дня для t0, кінець дня для t1 -> обидва дні повністю у вікні
    return (
        _local_to_utc(datetime.combine(start, time.min)),
        _local_to_utc(datetime.combine(end, time.max)),
    )


def render_sidebar() -> DashboardParams:
    st.sidebar.markdown("### Параметри")

    st.sidebar.markdown("**Інцидентність**")
    lo, hi = CFG.incidence_days_range
    incidence_days = st.sidebar.slider(
        "Інцидентність за (днів)", min_value=lo, max_value=hi, value=CFG.incidence_days
    )
    norm_incidence = st.sidebar.checkbox(
        "Нормалізувати на період", value=CFG.norm_incidence
    )
    lo, hi = CFG.norm_incidence_days_range
    norm_incidence_days = st.sidebar.slider(
        "Період нормалізації (днів)",
        min_value=lo,
        max_value=hi,
        value=CFG.norm_incidence_days,
        disabled=not norm_incidence,
    )

    st.sidebar.markdown("---")
    lo, hi = CFG.recovered_lead_range
    recovered_lead = st.sidebar.slider(
        "Зсунути криву одужань вперед на (днів)", min_value=lo, max_value=hi, value=CFG.recovered_lead
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown("**Експоненційна модель**")
    today = date.today()
    fit_start = st.sidebar.date_input("Від", value=today - timedelta(days=CFG.fit_window_days))
    fit_end = st.sidebar.date_input("До", value=today)
    modelled_series = st.sidebar.selectbox(
        "Ряд для моделювання",
        SERIES_ORDER,
        index=SERIES_ORDER.index(CFG.modelled_series),
        format_func=lambda k: SERIES_LABELS[k],
    )

    t0, t1 = fit_window_bounds(fit_start, fit_end)

    return DashboardParams(
        incidence_days=int(incidence_days),
        norm_incidence=bool(norm_incidence),
        norm_incidence_days=int(norm_incidence_days),
        recovered_lead=int(recovered_lead),
        fit_start=t0,
        fit_end=t1,
        modelled_series=str(modelled_series),
    )
