import numpy as np
import pandas as pd

from domain.entities import TABLE_COLUMNS
from infrastructure.ml.resampling import daily_grid, nearest_indices, resample_daily
from tests.conftest import make_raw

H = pd.Timedelta(hours=1)
D = pd.Timedelta(days=1)


def _irregular_raw(day0):
    times = []
    for d in range(3):
        for h in (0, 6, 12, 18):
            times.append(day0 + d * D + h * H)
    # остання публікація о 10:00 -> сітка прив'язана до 10:00
    times.append(day0 + 3 * D + 10 * H)
    return make_raw(times, range(1, len(times) + 1))


def test_rows_are_strictly_daily(day0):
    table = resample_daily(_irregular_raw(day0))

    assert list(table.columns) == TABLE_COLUMNS
    diffs = table["time"].diff().dropna()
    assert len(table) == 4
    assert (diffs == D).all()


def test_last_row_matches_last_raw_time_of_day(day0):
    raw = _irregular_raw(day0)
    table = resample_daily(raw)

    last_raw = raw["time"].iloc[-1]
    last_row = table["time"].iloc[-1]
    assert (last_row.hour, last_row.minute) == (last_raw.hour, last_raw.minute)
    assert last_row == last_raw


def test_nearest_record_is_copied(day0):
    raw = _irregular_raw(day0)
    table = resample_daily(raw)

    # 10:00 першого дня: 12:00 на 2 год ближче, ніж 6:00 (4 год)
    assert table["time"].iloc[0] == day0 + 10 * H
    row12 = raw[raw["time"] == day0 + 12 * H].iloc[0]
    assert table["cases"].iloc[0] == row12["cases"]
    assert table["dead"].iloc[0] == row12["dead"]


def test_tie_prefers_earlier_record():
    times = np.array([8, 12], dtype=np.int64)
    targets = np.array([10], dtype=np.int64)
    assert nearest_indices(times, targets).tolist() == [0]


def test_start_is_first_day_boundary_at_or_after_first_record(day0):
    first = day0 + 15 * H
    last = day0 + 4 * D + 9 * H + 30 * pd.Timedelta(minutes=1)
    grid = daily_grid(first, last)

    assert grid[0] == day0 + D + 9 * H + pd.Timedelta(minutes=30)
    assert grid[-1] == last
    assert len(grid) == 4


def test_unsorted_input_is_sorted(day0):
    raw = make_raw([day0 + 2 * D, day0, day0 + D], [3, 1, 2])
    table = resample_daily(raw)
    assert table["cases"].tolist() == [1.0, 2.0, 3.0]


def test_single_record_gives_empty_table(day0):
    table = resample_daily(make_raw([day0], [5]))
    assert len(table) == 0
    assert list(table.columns) == TABLE_COLUMNS


def test_start_after_stop_gives_empty_table(day0):
    # обидва записи в межах одного дня після півночі
    raw = make_raw([day0 + 1 * H, day0 + 5 * H], [1, 2])
    assert len(resample_daily(raw)) == 0


def test_grid_keeps_hour_and_minute_of_last_reading(day0):
    raw = make_raw(
        [day0 + 7 * H, day0 + D + 13 * H, day0 + 3 * D + 10 * H + pd.Timedelta(seconds=42)],
        [1, 2, 3],
    )
    table = resample_daily(raw)

    last_raw = raw["time"].iloc[-1]
    last_row = table["time"].iloc[-1]
    # секунди останнього запису в сітку не переносяться
    assert last_row == day0 + 3 * D + 10 * H
    assert (last_row.hour, last_row.minute) == (last_raw.hour, last_raw.minute)
    assert (table["time"].dt.second == 0).all()
    assert table["cases"].iloc[-1] == 3.0
