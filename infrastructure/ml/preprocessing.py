from __future__ import annotations

from typing import Dict

import pandas as pd

from core.errors import DatasetValidationError
from core.logging import get_logger
from domain.entities import TABLE_COLUMNS

logger = get_logger(__name__)


def load_and_validate_df(
    df: pd.DataFrame,
    column_map: Dict[str, str],
    time_col: str = "time",
) -> pd.DataFrame:
    if not isinstance(df, pd.DataFrame):
        raise DatasetValidationError("Дані не є коректним CSV.")

    missing = [c for c in column_map if c not in df.columns]
    if missing:
        raise DatasetValidationError(
            message="Відсутні обовʼязкові колонки",
            missing_fields=missing,
        )

    df = df[list(column_map.keys())].rename(columns=column_map).copy()

    # окремі зіпсовані клітинки (`-`, `n/a`) -> NaN, такі рядки відкине clean_raw_records
    for c in df.columns:
        df[c] = pd.to_numeric(df[c], errors="coerce")
        if len(df) > 0 and df[c].notna().sum() == 0:
            if c == time_col:
                raise DatasetValidationError(f"Колонка `{time_col}` має некоректний формат часу.")
            raise DatasetValidationError(f"Колонка `{c}` повинна бути числовою.")

    # час у джерелі: секунди від epoch (UTC)
    try:
        df[time_col] = pd.to_datetime(df[time_col], unit="s")
    except (ValueError, TypeError, OverflowError):
        raise DatasetValidationError(f"Колонка `{time_col}` має некоректний формат часу.")

    return df


def clean_raw_records(df: pd.DataFrame, time_col: str = "time") -> pd.DataFrame:
    n_in = len(df)
    df = df.dropna(subset=[c for c in TABLE_COLUMNS if c in df.columns])

    # stable sort: серед дублікатів часу залишаємо останній опублікований рядок
    df = df.sort_values(by=time_col, kind="mergesort")
    df = df.drop_duplicates(subset=[time_col], keep="last")
    df = df.reset_index(drop=True)

    logger.info("Cleaned raw records: %d -> %d rows", n_in, len(df))
    return df
