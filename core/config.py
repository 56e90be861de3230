from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class AppConfig:
    # ---- Data source ----
    dataset_url: str = (
        "https://opendata.jena.de/dataset/2cc7773d-beba-43ad-9808-a420a67ffcb3"
        "/resource/d3ba07b6-fb19-451b-b902-5b18d8e8cbad/download/corona_erkrankungen_jena.csv"
    )
    http_timeout: float = 30.0
    cache_ttl_seconds: int = 3600

    # нормалізована назва колонки CSV -> внутрішня назва
    column_map: Dict[str, str] = None  # type: ignore

    # ---- Incidence ----
    population: int = 108_127
    incidence_days: int = 7
    incidence_days_range: tuple[int, int] = (1, 100)
    norm_incidence: bool = False
    norm_incidence_days: int = 7
    norm_incidence_days_range: tuple[int, int] = (1, 100)

    # ---- Cases vs recovered ----
    recovered_lead: int = 0
    recovered_lead_range: tuple[int, int] = (0, 50)
    max_recovery_lag: int = 80

    # ---- Exponential model ----
    fit_window_days: int = 7
    modelled_series: str = "cases"

    # ---- Logging ----
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.column_map is None:
            object.__setattr__(
                self,
                "column_map",
                {
                    "zeit": "time",
                    "erkrankte": "cases",
                    "aktive_faelle": "active",
                    "genesene": "recovered",
                    "neu_erkrankte": "new_cases",
                    "tote": "dead",
                },
            )


CFG = AppConfig()
