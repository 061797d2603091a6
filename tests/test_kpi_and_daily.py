"""Tests for the KPI snapshot and the daily omset series."""

import logging

import pandas as pd
import pytest

from sales_core.metrics import KPIStats, compute_kpis, daily_omset
from sales_core.transactions import normalize_records


class TestKPIs:
    def test_invoice_and_return_on_same_invoice(self) -> None:
        """I/100/qty2 plus R/30/qty1 on A1 nets 70 with one invoice."""
        rows = normalize_records(
            [
                {"Status": "I", "Line_Value": 100, "Invoice_No": "A1", "Retailer_Code": "R1",
                 "Invoice_Qty": 2},
                {"Status": "R", "Line_Value": 30, "Invoice_No": "A1", "Retailer_Code": "R1",
                 "Invoice_Qty": 1},
            ]
        )

        stats = compute_kpis(rows)

        assert stats.total_omset == 70.0
        assert stats.total_invoice == 1
        assert stats.total_quantity == 1.0
        assert stats.outlet_active == 1
        assert stats.total_line_sold == 1
        assert stats.avg_sku_per_invoice == 1.0

    def test_sample_export(self, sample_rows: pd.DataFrame) -> None:
        stats = compute_kpis(sample_rows)

        assert stats.total_omset == pytest.approx(2550.0)
        assert stats.total_invoice == 4
        assert stats.total_quantity == pytest.approx(25.0)
        assert stats.outlet_active == 5, "the return-only outlet R002 still counts as active"
        assert stats.total_line_sold == 5
        assert stats.avg_sku_per_invoice == pytest.approx(1.25)

    def test_returns_only_gives_zero_invoices(self) -> None:
        rows = normalize_records(
            [{"Status": "R", "Line_Value": 50, "Invoice_No": "X", "Retailer_Code": "R9"}]
        )
        stats = compute_kpis(rows)

        assert stats.total_omset == -50.0
        assert stats.total_invoice == 0
        assert stats.total_line_sold == 0
        assert stats.avg_sku_per_invoice == 0.0
        assert stats.outlet_active == 1

    def test_empty_rows(self) -> None:
        stats = compute_kpis(normalize_records([]))
        assert stats == KPIStats(0.0, 0, 0.0, 0, 0.0, 0)

    def test_to_dict(self, sample_rows: pd.DataFrame) -> None:
        data = compute_kpis(sample_rows).to_dict()
        assert list(data) == [
            "total_omset",
            "total_invoice",
            "total_quantity",
            "outlet_active",
            "avg_sku_per_invoice",
            "total_line_sold",
        ]


class TestDailyOmset:
    def test_serial_date_with_return(self) -> None:
        """Values 50 and -20 on serial 44927 give a single 01/01 point of 30."""
        rows = normalize_records(
            [
                {"Invoice_Date": 44927, "Status": "I", "Line_Value": 50},
                {"Invoice_Date": 44927, "Status": "R", "Line_Value": 20},
            ]
        )

        daily = daily_omset(rows)

        assert len(daily) == 1
        assert daily.loc[0, "label"] == "01/01"
        assert daily.loc[0, "timestamp"] == pd.Timestamp("2023-01-01")
        assert daily.loc[0, "omset"] == 30.0

    def test_sample_export_days_ascending(self, sample_rows: pd.DataFrame) -> None:
        daily = daily_omset(sample_rows)

        assert daily["label"].tolist() == ["01/01", "02/01", "03/01"]
        assert daily["omset"].tolist() == [1500.0, 600.0, 300.0]
        assert daily["timestamp"].is_monotonic_increasing

    def test_times_on_same_day_collapse(self) -> None:
        rows = normalize_records(
            [
                {"Invoice_Date": "2023-03-05 23:00", "Status": "I", "Line_Value": 10},
                {"Invoice_Date": "2023-03-04 08:00", "Status": "I", "Line_Value": 5},
                {"Invoice_Date": "05/03/2023", "Status": "I", "Line_Value": 1},
            ]
        )
        daily = daily_omset(rows)

        assert daily["label"].tolist() == ["04/03", "05/03"]
        assert daily["omset"].tolist() == [5.0, 11.0]

    def test_month_first_source(self) -> None:
        rows = normalize_records([{"Invoice_Date": "03/05/2023", "Status": "I", "Line_Value": 1}])
        assert daily_omset(rows, day_first=False)["label"].tolist() == ["05/03"]
        assert daily_omset(rows)["label"].tolist() == ["03/05"]

    def test_unresolvable_dates_are_left_out_with_warning(
        self, sample_rows: pd.DataFrame, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The 150 row with a bad date is missing from the series only."""
        with caplog.at_level(logging.WARNING, logger="sales_core.metrics.daily"):
            daily = daily_omset(sample_rows)

        assert daily["omset"].sum() == pytest.approx(2400.0)
        assert compute_kpis(sample_rows).total_omset == pytest.approx(2550.0)
        assert "1 row(s) with unresolvable Invoice_Date" in caplog.text

    def test_out_of_range_dates_only_drop_their_rows(self) -> None:
        """Serial 3000000 (year 10113) and year 1500 are skipped, 44927 still plots."""
        rows = normalize_records(
            [
                {"Invoice_Date": 44927, "Status": "I", "Line_Value": 40},
                {"Invoice_Date": 3000000, "Status": "I", "Line_Value": 25},
                {"Invoice_Date": "01/01/1500", "Status": "I", "Line_Value": 10},
            ]
        )

        daily = daily_omset(rows)

        assert daily["label"].tolist() == ["01/01"]
        assert daily["omset"].tolist() == [40.0]
        assert compute_kpis(rows).total_omset == 75.0

    def test_no_resolvable_dates(self) -> None:
        rows = normalize_records([{"Invoice_Date": None, "Status": "I", "Line_Value": 10}])
        daily = daily_omset(rows)
        assert daily.empty
        assert list(daily.columns) == ["label", "timestamp", "omset"]

    def test_empty_rows(self) -> None:
        daily = daily_omset(normalize_records([]))
        assert daily.empty
        assert list(daily.columns) == ["label", "timestamp", "omset"]
