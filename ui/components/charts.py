from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from domain.entities import SERIES_LABELS, ExpModel


def _layout(fig: go.Figure, title: str, yaxis_title: str, showlegend: bool = False) -> go.Figure:
    fig.update_layout(
        title=title,
        xaxis_title="Дата",
        yaxis_title=yaxis_title,
        hovermode="x unified",
        showlegend=showlegend,
    )
    return fig


def build_line_figure(table: pd.DataFrame, col: str, title: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=table["time"], y=table[col], mode="lines", name=SERIES_LABELS.get(col, col)))
    return _layout(fig, title, SERIES_LABELS.get(col, col))


def build_bar_figure(table: pd.DataFrame, col: str, title: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(x=table["time"], y=table[col], name=SERIES_LABELS.get(col, col)))
    return _layout(fig, title, SERIES_LABELS.get(col, col))


def build_incidence_figure(inc: pd.DataFrame, days: int) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=inc["time"], y=inc["incidence"], mode="lines", name="Інцидентність"))
    return _layout(fig, f"{days}-денна інцидентність на 100 000 мешканців", "Випадків на 100 000")


def build_cases_recovered_figure(
    table: pd.DataFrame,
    recovered_lead: pd.Series,
    lead_days: int,
) -> go.Figure:
    label = "Одужали"
    if lead_days > 0:
        label += f" (зсув вперед на {lead_days} дн.)"

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=table["time"], y=table["cases"], mode="lines", name="Випадки"))
    fig.add_trace(go.Scatter(x=table["time"], y=recovered_lead, mode="lines", name=label))
    fig = _layout(fig, "Випадки та одужання", "Кількість", showlegend=True)
    fig.update_layout(legend=dict(yanchor="bottom", y=0.01, xanchor="right", x=0.99))
    return fig


def build_model_figure(table: pd.DataFrame, series: str, model: Optional[ExpModel]) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=table["time"], y=table[series], mode="lines", name="Реальні дані"))

    if model is not None:
        fig.add_trace(
            go.Scatter(x=table["time"], y=model.values, mode="lines", name="Модель", connectgaps=False)
        )
        # відрізок на осі X = вікно регресії
        fig.add_trace(
            go.Scatter(
                x=[model.t0, model.t1],
                y=[0, 0],
                mode="lines",
                line=dict(width=5),
                name="Вікно регресії",
            )
        )

    fig = _layout(fig, f"Експоненційна модель: {SERIES_LABELS.get(series, series)}", "Кількість", showlegend=True)
    fig.update_layout(legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01))
    return fig


def render_figure(fig: go.Figure) -> None:
    st.plotly_chart(fig, config={"responsive": True})
