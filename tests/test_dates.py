"""Tests for invoice date resolution."""

import warnings
from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from sales_core.transactions.dates import resolve_invoice_date, serial_to_timestamp


def test_serial_epoch() -> None:
    """Serial 25569 is 1970-01-01 and 44927 is 2023-01-01."""
    assert serial_to_timestamp(25569) == pd.Timestamp("1970-01-01")
    assert resolve_invoice_date(44927) == pd.Timestamp("2023-01-01")


@pytest.mark.parametrize(
    "raw",
    [44927, 44927.0, 44927.75, np.int64(44927), np.float64(44927.25), "44927", " 44927.5 "],
)
def test_serial_numbers_and_numeric_strings(raw: object) -> None:
    """Fractions (time of day) are dropped, numeric strings are serials too."""
    assert resolve_invoice_date(raw) == pd.Timestamp("2023-01-01")


@pytest.mark.parametrize(
    "raw",
    [
        datetime(2023, 1, 15, 14, 30),
        date(2023, 1, 15),
        pd.Timestamp("2023-01-15 23:59:59"),
        np.datetime64("2023-01-15T08:00"),
    ],
)
def test_datetime_values(raw: object) -> None:
    assert resolve_invoice_date(raw) == pd.Timestamp("2023-01-15")


@pytest.mark.parametrize(
    "raw",
    [
        "2023-01-15",
        "2023/01/15",
        "2023-1-15",
        "2023-01-15 10:30:00",
        "2023-01-15T10:30:00",
    ],
)
def test_year_first_strings(raw: str) -> None:
    assert resolve_invoice_date(raw) == pd.Timestamp("2023-01-15")


def test_time_zone_is_dropped_keeping_wall_clock() -> None:
    """The local calendar day is kept, not converted to UTC."""
    assert resolve_invoice_date("2023-01-15T23:30:00+07:00") == pd.Timestamp("2023-01-15")
    aware = pd.Timestamp("2023-01-15 01:00", tz="Asia/Jakarta")
    assert resolve_invoice_date(aware) == pd.Timestamp("2023-01-15")


class TestPositionalDates:
    """a/b/c and a-b-c strings."""

    @pytest.mark.parametrize("raw", ["15/01/2023", "15-01-2023", "15/1/2023", "15/01/2023 10:30"])
    def test_day_first_default(self, raw: str) -> None:
        assert resolve_invoice_date(raw) == pd.Timestamp("2023-01-15")

    def test_ambiguous_date_follows_configured_order(self) -> None:
        assert resolve_invoice_date("05/01/2023") == pd.Timestamp("2023-01-05")
        assert resolve_invoice_date("05/01/2023", day_first=False) == pd.Timestamp("2023-05-01")

    def test_month_first_when_configured(self) -> None:
        assert resolve_invoice_date("1/15/2023", day_first=False) == pd.Timestamp("2023-01-15")

    def test_impossible_day_first_reading_falls_back(self) -> None:
        """1/15/2023 has no 15th month, so the generic parser resolves it."""
        assert resolve_invoice_date("1/15/2023") == pd.Timestamp("2023-01-15")

    def test_two_digit_year_is_1900s(self) -> None:
        assert resolve_invoice_date("15/01/23") == pd.Timestamp("1923-01-15")

    def test_impossible_calendar_date(self) -> None:
        assert pd.isna(resolve_invoice_date("31/02/2023"))


@pytest.mark.parametrize("raw", [3000000, -700000, "3000000", "01/01/1500", "01/01/2500"])
def test_days_outside_timestamp_range_are_nat(raw: object) -> None:
    """Far-off serials and years resolve to NaT instead of an unusable Timestamp."""
    assert pd.isna(resolve_invoice_date(raw))


def test_month_first_fallback_is_silent() -> None:
    """12/31/2023 read day-first falls back without a pandas format warning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error", UserWarning)
        assert resolve_invoice_date("12/31/2023") == pd.Timestamp("2023-12-31")


def test_other_strings_use_generic_parser() -> None:
    assert resolve_invoice_date("15 Jan 2023") == pd.Timestamp("2023-01-15")


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "not a date", float("nan"), float("inf"), True, False, object()],
)
def test_unresolvable_values_are_nat(raw: object) -> None:
    """Garbage never raises, it resolves to NaT."""
    assert pd.isna(resolve_invoice_date(raw))
