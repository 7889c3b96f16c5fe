from __future__ import annotations

from datetime import date, timedelta

import pytest

from relcal.core.dates import add_months
from relcal.services.release.model import ReleaseCycle
from relcal.services.release.schedule import (
    accelerated_cycle,
    format_monthly_version,
    month_index,
    monthly_cycle,
    second_tuesday,
    versions_between,
)


def _days(start: date, end: date) -> list[date]:
    return [start + timedelta(days=i) for i in range((end - start).days)]


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(p) for p in version.split("."))


# --- second_tuesday ----------------------------------------------------------


@pytest.mark.parametrize(
    ("when", "expected"),
    [
        (date(2023, 7, 20), date(2023, 7, 11)),  # 1st is Saturday
        (date(2023, 8, 31), date(2023, 8, 8)),  # 1st is Tuesday
        (date(2023, 10, 1), date(2023, 10, 10)),  # 1st is Sunday
        (date(2023, 11, 1), date(2023, 11, 14)),  # 1st is Wednesday
        (date(2024, 1, 1), date(2024, 1, 9)),  # 1st is Monday
        (date(2024, 2, 29), date(2024, 2, 13)),  # 1st is Thursday
    ],
)
def test_second_tuesday(when: date, expected: date) -> None:
    assert second_tuesday(when) == expected


def test_second_tuesday_is_always_day_8_to_14_tuesday() -> None:
    for when in _days(date(2023, 1, 1), date(2027, 1, 1)):
        result = second_tuesday(when)
        assert result.isoweekday() == 2
        assert 8 <= result.day <= 14
        assert (result.year, result.month) == (when.year, when.month)


# --- version numbering -------------------------------------------------------


def test_month_index_counts_from_july_2023() -> None:
    assert month_index(date(2023, 7, 11)) == 0
    assert month_index(date(2023, 12, 12)) == 5
    assert month_index(date(2024, 7, 9)) == 12
    assert month_index(date(2023, 6, 13)) == -1


def test_format_monthly_version() -> None:
    assert format_monthly_version(0) == "8.0"
    assert format_monthly_version(9) == "8.9"
    assert format_monthly_version(19) == "9.9"
    assert format_monthly_version(20) == "10.0"
    assert format_monthly_version(-1) == "7.9"


def test_format_monthly_version_before_zero_keeps_sign_and_magnitude() -> None:
    assert format_monthly_version(-80) == "0.0"
    assert format_monthly_version(-81) == "-0.1"
    assert format_monthly_version(-83) == "-0.3"
    assert format_monthly_version(-95) == "-1.5"


def test_monthly_cycle_far_before_epoch_is_negative() -> None:
    # Versioned from August 2016, 83 months before the epoch.
    assert monthly_cycle(date(2016, 9, 1), development=False).version == "-0.3.0"


# --- monthly_cycle -----------------------------------------------------------


def test_monthly_cycle_at_epoch_is_8_0() -> None:
    cycle = monthly_cycle(date(2023, 7, 12))
    assert cycle == ReleaseCycle(
        version="8.0.0",
        begin=date(2023, 6, 22),
        freeze=date(2023, 7, 19),
        release=date(2023, 8, 8),
    )


def test_monthly_cycle_on_release_day_picks_that_release() -> None:
    cycle = monthly_cycle(date(2023, 8, 8), development=False)
    assert cycle.version == "8.0.0"
    assert cycle.release == date(2023, 8, 8)


def test_monthly_cycle_day_after_release_moves_on() -> None:
    cycle = monthly_cycle(date(2023, 8, 9), development=False)
    assert cycle.version == "8.1.0"
    assert cycle.release == date(2023, 9, 12)


def test_monthly_cycle_freeze_day_is_still_in_development() -> None:
    assert monthly_cycle(date(2023, 7, 19)).version == "8.0.0"


def test_monthly_cycle_after_freeze_develops_next_release() -> None:
    cycle = monthly_cycle(date(2023, 7, 20))
    assert cycle == ReleaseCycle(
        version="8.1.0",
        begin=date(2023, 7, 20),
        freeze=date(2023, 8, 23),
        release=date(2023, 9, 12),
    )
    # The released view of the same day still reports the frozen cycle.
    assert monthly_cycle(date(2023, 7, 20), development=False).version == "8.0.0"


def test_monthly_cycle_across_year_boundary() -> None:
    cycle = monthly_cycle(date(2024, 1, 9), development=False)
    assert cycle == ReleaseCycle(
        version="8.5.0",
        begin=date(2023, 11, 23),
        freeze=date(2023, 12, 20),
        release=date(2024, 1, 9),
    )


def test_monthly_cycle_offsets() -> None:
    for when in _days(date(2023, 6, 1), date(2026, 6, 1)):
        for development in (True, False):
            cycle = monthly_cycle(when, development=development)
            assert cycle.begin < cycle.freeze < cycle.release
            assert cycle.release == second_tuesday(cycle.release)
            assert cycle.release - cycle.freeze == timedelta(days=20)
            previous = second_tuesday(cycle.release - timedelta(days=21))
            assert previous - cycle.begin == timedelta(days=19)


def test_monthly_versions_never_decrease() -> None:
    start = date(2023, 8, 1)
    versions = [
        _version_key(monthly_cycle(add_months(start, k), development=False).version)
        for k in range(48)
    ]
    assert versions == sorted(versions)
    assert len(set(versions)) == 48


def test_monthly_cycle_is_idempotent_on_release_day() -> None:
    for k in range(36):
        cycle = monthly_cycle(add_months(date(2023, 7, 1), k), development=False)
        assert monthly_cycle(cycle.release, development=False) == cycle


# --- accelerated_cycle -------------------------------------------------------


def test_accelerated_on_freeze_wednesday() -> None:
    cycle = accelerated_cycle(date(2023, 8, 9))
    assert cycle == ReleaseCycle(
        version="8.1.0.10",
        begin=date(2023, 8, 3),
        freeze=date(2023, 8, 9),
        release=date(2023, 8, 15),
    )


def test_accelerated_on_thursday_moves_to_next_week() -> None:
    cycle = accelerated_cycle(date(2023, 8, 10))
    assert cycle.version == "8.1.0.20"
    assert cycle.freeze == date(2023, 8, 16)
    assert cycle.begin == date(2023, 8, 10)
    assert cycle.release == date(2023, 8, 22)


def test_accelerated_released_looks_back_a_week() -> None:
    assert accelerated_cycle(date(2023, 8, 16), development=False) == accelerated_cycle(
        date(2023, 8, 9)
    )


def test_accelerated_last_week_before_monthly_release() -> None:
    # Five Tuesdays between the August and September monthly releases.
    assert accelerated_cycle(date(2023, 9, 6)).version == "8.1.0.50"


def test_accelerated_freeze_after_monthly_release_belongs_to_next_month() -> None:
    assert accelerated_cycle(date(2023, 9, 13)).version == "8.2.0.10"


def test_accelerated_before_monthly_release_in_same_month() -> None:
    assert accelerated_cycle(date(2023, 8, 2)).version == "8.0.0.40"


def test_accelerated_shape() -> None:
    for when in _days(date(2023, 6, 1), date(2025, 6, 1)):
        for development in (True, False):
            cycle = accelerated_cycle(when, development=development)
            assert cycle.freeze.isoweekday() == 3
            assert cycle.release - cycle.freeze == timedelta(days=6)
            assert cycle.freeze - cycle.begin == timedelta(days=6)
            assert cycle.kind == "accelerated"
            index = int(cycle.version.rsplit(".", 1)[1])
            assert index % 10 == 0
            assert 10 <= index <= 50


def test_accelerated_is_idempotent_on_release_day() -> None:
    cycle = accelerated_cycle(date(2024, 3, 6))
    assert accelerated_cycle(cycle.release, development=False) == cycle


# --- versions_between --------------------------------------------------------


def test_versions_between() -> None:
    cycles = versions_between(date(2023, 8, 1), date(2023, 8, 29))
    assert {c.version for c in cycles} == {
        "8.0.0",
        "8.0.0.30",
        "8.0.0.40",
        "8.1.0.10",
        "8.1.0.20",
    }


def test_versions_between_is_symmetric() -> None:
    a, b = date(2023, 6, 3), date(2024, 2, 17)
    assert set(versions_between(a, b)) == set(versions_between(b, a))


def test_versions_between_unique_versions() -> None:
    cycles = versions_between(date(2023, 7, 1), date(2024, 7, 1))
    versions = [c.version for c in cycles]
    assert len(versions) == len(set(versions))
    assert {"8.0.0", "8.5.0", "9.0.0"} <= set(versions)


def test_versions_between_empty_range() -> None:
    assert versions_between(date(2023, 8, 1), date(2023, 8, 1)) == []
