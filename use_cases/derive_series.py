from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from infrastructure.ml.derived import estimate_recovery_lag, incidence, lead


@dataclass(frozen=True)
class DeriveSeriesInput:
    incidence_days: int
    population: float
    norm_incidence: bool
    norm_incidence_days: int
    recovered_lead: int
    max_recovery_lag: int = 80


@dataclass(frozen=True)
class DeriveSeriesOutput:
    incidence: pd.DataFrame
    recovered_lead: pd.Series
    recovery_lag: Optional[int]


def derive_series_uc(table: pd.DataFrame, inp: DeriveSeriesInput) -> DeriveSeriesOutput:
    inc = incidence(
        table,
        days=int(inp.incidence_days),
        population=float(inp.population),
        normalize=bool(inp.norm_incidence),
        norm_days=int(inp.norm_incidence_days),
    )
    return DeriveSeriesOutput(
        incidence=inc,
        recovered_lead=lead(table["recovered"], int(inp.recovered_lead)),
        recovery_lag=estimate_recovery_lag(table, max_lag=int(inp.max_recovery_lag)),
    )
