from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from core.errors import InsufficientDataError
from core.logging import get_logger
from domain.entities import ExpModel
from infrastructure.ml.exp_model import fit_exponential

logger = get_logger(__name__)


@dataclass(frozen=True)
class FitModelInput:
    series: str
    t0: datetime
    t1: datetime


@dataclass(frozen=True)
class FitModelOutput:
    model: Optional[ExpModel]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.model is not None


def fit_model_uc(table: pd.DataFrame, inp: FitModelInput) -> FitModelOutput:
    try:
        model = fit_exponential(table, inp.series, inp.t0, inp.t1)
    except InsufficientDataError as e:
        logger.warning("Cannot fit %s on %s .. %s: %s", inp.series, inp.t0, inp.t1, e)
        return FitModelOutput(model=None, error=str(e))
    return FitModelOutput(model=model)
