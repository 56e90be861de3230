from __future__ import annotations

import pandas as pd
import pytest

DAY0 = pd.Timestamp("2020-11-01 00:00:00")


def make_raw(times, cases) -> pd.DataFrame:
    cases = [float(c) for c in cases]
    return pd.DataFrame(
        {
            "time": pd.to_datetime(list(times)),
            "cases": cases,
            "active": [c / 2 for c in cases],
            "recovered": [c / 4 for c in cases],
            "new_cases": [c / 10 for c in cases],
            "dead": [c / 100 for c in cases],
        }
    )


def make_table(values, start=DAY0, col="cases") -> pd.DataFrame:
    times = [start + pd.Timedelta(days=k) for k in range(len(values))]
    df = make_raw(times, values)
    if col != "cases":
        df[col] = [float(v) for v in values]
    return df


@pytest.fixture
def day0() -> pd.Timestamp:
    return DAY0
