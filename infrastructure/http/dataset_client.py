from __future__ import annotations

import io
import re
from typing import Iterable

import pandas as pd
import requests

from core.errors import DataFetchError, DatasetValidationError
from core.logging import get_logger

logger = get_logger(__name__)

_NON_ALNUM = re.compile(r"[^0-9a-z]+")


def normalize_column_names(columns: Iterable[str]) -> list[str]:
    """
    Приводить назви колонок до вигляду `aktive_faelle`:
    нижній регістр, усе не буквено-цифрове -> `_`.
    """
    out: list[str] = []
    for c in columns:
        name = _NON_ALNUM.sub("_", str(c).strip().lower()).strip("_")
        out.append(name)
    return out


def fetch_dataset_csv(url: str, timeout: float = 30.0) -> str:
    logger.info("Fetching dataset from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error("Dataset request failed: %s", e)
        raise DataFetchError(f"Не вдалося завантажити дані: {e}", url=url) from e

    # сервер віддає CSV без charset у заголовку
    if response.encoding is None or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"

    text = response.text
    logger.info("Fetched %d bytes", len(text))
    return text


def read_raw_frame(text: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(io.StringIO(text))
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetValidationError(f"Неможливо розібрати CSV: {e}") from e

    df.columns = normalize_column_names(df.columns)
    logger.debug("Raw columns: %s", list(df.columns))
    return df
