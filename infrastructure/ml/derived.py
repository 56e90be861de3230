from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from core.logging import get_logger

logger = get_logger(__name__)


def incidence(
    table: pd.DataFrame,
    days: int,
    population: float,
    normalize: bool = False,
    norm_days: int = 7,
) -> pd.DataFrame:
    """
    n-денна інцидентність на 100 000 мешканців.

    Рядок i = cases[i] - cases[i - days]; результат починається з рядка `days`.
    З `normalize` сума перераховується на період `norm_days` днів.
    """
    if days < 1:
        raise ValueError("days must be >= 1")
    if norm_days < 1:
        raise ValueError("norm_days must be >= 1")

    cases = table["cases"].astype(float).reset_index(drop=True)
    diff = (cases - cases.shift(days)).iloc[days:]
    if normalize:
        diff = diff / (days / norm_days)

    return pd.DataFrame(
        {
            "time": table["time"].reset_index(drop=True).iloc[days:].to_numpy(),
            "incidence": (diff / float(population) * 100_000).to_numpy(),
        }
    )


def lead(values: pd.Series, n: int) -> pd.Series:
    if n < 0:
        raise ValueError("lead must be >= 0")
    return values.astype(float).shift(-n)


def estimate_recovery_lag(table: pd.DataFrame, max_lag: int = 80) -> Optional[int]:
    """Зсув (днів), що мінімізує середній квадрат різниці між випадками та одужаннями."""
    cases = table["cases"].to_numpy(dtype=float)
    recovered = table["recovered"].to_numpy(dtype=float)
    n = len(cases)
    if n == 0:
        return None

    best_lag, best_err = None, np.inf
    for lag in range(0, min(max_lag, n - 1) + 1):
        a = cases[: n - lag]
        b = recovered[lag:]
        err = float(np.mean((a - b) ** 2))
        if err < best_err:
            best_lag, best_err = lag, err

    logger.debug("Estimated recovery lag: %s days (mse=%.2f)", best_lag, best_err)
    return best_lag
