from __future__ import annotations

import numpy as np
import pandas as pd

from core.logging import get_logger
from domain.entities import TABLE_COLUMNS

logger = get_logger(__name__)

ONE_DAY = pd.Timedelta(days=1)


def _empty_table() -> pd.DataFrame:
    df = pd.DataFrame({c: pd.Series(dtype="float64") for c in TABLE_COLUMNS})
    df["time"] = pd.Series(dtype="datetime64[ns]")
    return df


def daily_grid(first: pd.Timestamp, last: pd.Timestamp) -> pd.DatetimeIndex:
    """
    Щоденна вісь часу: від першої межі доби не раніше `first`, зсунутої до
    години й хвилини `last`, і до `last` включно.
    """
    first = pd.Timestamp(first)
    last = pd.Timestamp(last)

    start = first.ceil("D") + pd.Timedelta(hours=last.hour, minutes=last.minute)
    if start > last:
        return pd.DatetimeIndex([])
    return pd.date_range(start=start, end=last, freq=ONE_DAY)


def nearest_indices(times: np.ndarray, targets: np.ndarray) -> np.ndarray:
    # argmin повертає перший мінімум -> при рівності береться раніший запис
    diff = np.abs(targets[:, None] - times[None, :])
    return diff.argmin(axis=1)


def resample_daily(raw: pd.DataFrame, time_col: str = "time") -> pd.DataFrame:
    if len(raw) < 2:
        logger.info("Resampling skipped: %d raw rows", len(raw))
        return _empty_table()

    raw = raw.sort_values(by=time_col, kind="mergesort").reset_index(drop=True)
    times = pd.to_datetime(raw[time_col])

    grid = daily_grid(times.iloc[0], times.iloc[-1])
    if len(grid) == 0:
        logger.info("Resampling skipped: empty daily grid")
        return _empty_table()

    t_ns = times.to_numpy(dtype="datetime64[ns]").astype(np.int64)
    g_ns = grid.to_numpy(dtype="datetime64[ns]").astype(np.int64)
    idx = nearest_indices(t_ns, g_ns)

    out = raw.iloc[idx][[c for c in TABLE_COLUMNS if c != time_col]].reset_index(drop=True)
    out.insert(0, time_col, grid)

    logger.info(
        "Resampled %d raw rows onto %d daily steps (%s .. %s)",
        len(raw), len(out), grid[0], grid[-1],
    )
    return out
