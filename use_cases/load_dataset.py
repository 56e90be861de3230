from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from core.config import AppConfig
from core.logging import get_logger
from infrastructure.http.dataset_client import fetch_dataset_csv, read_raw_frame
from infrastructure.ml.preprocessing import clean_raw_records, load_and_validate_df
from infrastructure.ml.resampling import resample_daily

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadDatasetInput:
    # якщо CSV вже завантажено (кеш Streamlit), повторно не ходимо в мережу
    csv_text: Optional[str] = None


@dataclass(frozen=True)
class LoadDatasetOutput:
    raw: pd.DataFrame
    table: pd.DataFrame
    raw_columns: List[str]
    last_update: Optional[pd.Timestamp]


def load_dataset_uc(cfg: AppConfig, inp: LoadDatasetInput) -> LoadDatasetOutput:
    text = inp.csv_text
    if text is None:
        text = fetch_dataset_csv(cfg.dataset_url, timeout=cfg.http_timeout)

    df_raw = read_raw_frame(text)
    raw_columns = list(df_raw.columns)

    raw = load_and_validate_df(df_raw, cfg.column_map)
    raw = clean_raw_records(raw)
    table = resample_daily(raw)

    last_update = pd.Timestamp(raw["time"].iloc[-1]) if len(raw) > 0 else None
    logger.info("Dataset ready: %d raw rows, %d daily rows", len(raw), len(table))

    return LoadDatasetOutput(raw=raw, table=table, raw_columns=raw_columns, last_update=last_update)
