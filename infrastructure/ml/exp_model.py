from __future__ import annotations

import math
from datetime import datetime

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score

from core.errors import InsufficientDataError
from core.logging import get_logger
from domain.entities import SERIES_ORDER, ExpModel

logger = get_logger(__name__)

# нахил нижче цього порогу вважаємо відсутністю росту
GROWTH_EPS = 1e-9


def days_since(times: pd.Series, t0: datetime) -> np.ndarray:
    return ((pd.to_datetime(times) - pd.Timestamp(t0)) / pd.Timedelta(days=1)).to_numpy(dtype=float)


def doubling_time_from_slope(slope: float) -> float | None:
    if not np.isfinite(slope) or slope <= GROWTH_EPS:
        return None
    return math.log(2.0) / slope


def fit_exponential(
    table: pd.DataFrame,
    series: str,
    t0: datetime,
    t1: datetime,
    time_col: str = "time",
) -> ExpModel:
    if series not in SERIES_ORDER or series not in table.columns:
        raise InsufficientDataError(f"Невідомий ряд для моделювання: `{series}`.")

    t0 = pd.Timestamp(t0)
    t1 = pd.Timestamp(t1)
    times = pd.to_datetime(table[time_col])
    in_window = ((times >= t0) & (times <= t1)).to_numpy()

    y = table.loc[in_window, series].to_numpy(dtype=float)
    if len(y) < 2:
        raise InsufficientDataError(
            f"Замало даних у вікні {t0:%Y-%m-%d} — {t1:%Y-%m-%d}: {len(y)} точок."
        )
    if np.any(~np.isfinite(y)) or np.any(y <= 0):
        raise InsufficientDataError(
            "У вікні є нульові або відʼємні значення, логарифм не визначений."
        )

    x_all = days_since(times, t0)
    X = x_all[in_window].reshape(-1, 1)
    log_y = np.log(y)

    reg = LinearRegression()
    reg.fit(X, log_y)
    slope = float(reg.coef_[0])
    intercept = float(reg.intercept_)
    # для сталого ряду дисперсія log_y нульова, R² не визначений
    if np.all(y == y[0]):
        r2 = float("nan")
    else:
        r2 = float(r2_score(log_y, reg.predict(X)))

    # прогноз на всю таблицю, але показуємо лише у вікні регресії
    pred = np.exp(intercept + slope * x_all)
    pred[~in_window] = np.nan
    values = pd.Series(pred, index=table.index, name=f"{series}_model")

    doubling = doubling_time_from_slope(slope)
    logger.info(
        "Exp fit of %s on %d points: slope=%.5f/day, doubling=%s, R2=%.4f",
        series, len(y), slope, "undefined" if doubling is None else f"{doubling:.2f}d", r2,
    )

    return ExpModel(
        series=series,
        t0=t0.to_pydatetime(),
        t1=t1.to_pydatetime(),
        values=values,
        slope=slope,
        intercept=intercept,
        doubling_time=doubling,
        r2=r2,
        n_points=int(len(y)),
    )
