from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd


# Порядок колонок таблиці після ресемплінгу
TABLE_COLUMNS = ["time", "cases", "active", "recovered", "new_cases", "dead"]

SERIES_LABELS = {
    "cases": "Загальна кількість випадків",
    "active": "Активні випадки",
    "recovered": "Одужали",
    "new_cases": "Нові випадки",
    "dead": "Померлі",
}

SERIES_ORDER = list(SERIES_LABELS.keys())


@dataclass(frozen=True)
class ExpModel:
    series: str
    t0: datetime
    t1: datetime

    # по одному значенню на рядок таблиці, NaN поза [t0, t1]
    values: pd.Series
    slope: float
    intercept: float
    doubling_time: Optional[float]
    r2: float
    n_points: int

    @property
    def is_growing(self) -> bool:
        return self.doubling_time is not None
