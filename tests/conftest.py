"""Shared fixtures for the sales_core test suite."""

from __future__ import annotations

from typing import Any

import pandas as pd
import pytest

from sales_core.transactions.normalize import normalize_records


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """A small but realistic export: two branches, three reps, one return.

    Net omset by rep: SLS01 = 1000 + 500 - 200 = 1300, SLS02 = 800 + 300 = 1100,
    SLS03 = 150. Invoice dates mix serial numbers and strings.
    """
    return [
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R001",
            "Branch_Code": "JKT",
            "User_Code": "SLS01",
            "Invoice_No": "INV-001",
            "Invoice_Date": 44927,
            "SKU_Code": "SKU-A",
            "Invoice_Qty": 10,
            "SKU_Price": 100,
            "Line_Value": 1000,
            "Status": "I",
        },
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R001",
            "Branch_Code": "JKT",
            "User_Code": "SLS01",
            "Invoice_No": "INV-001",
            "Invoice_Date": 44927,
            "SKU_Code": "SKU-B",
            "Invoice_Qty": 5,
            "SKU_Price": 100,
            "Line_Value": 500,
            "Status": "I",
        },
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R002",
            "Branch_Code": "JKT",
            "User_Code": "SLS01",
            "Invoice_No": "RET-001",
            "Invoice_Date": "02/01/2023",
            "SKU_Code": "SKU-A",
            "Invoice_Qty": "2",
            "SKU_Price": 100,
            "Line_Value": "200",
            "Status": "R",
        },
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R003",
            "Branch_Code": "BDG",
            "User_Code": "SLS02",
            "Invoice_No": "INV-002",
            "Invoice_Date": "2023-01-02",
            "SKU_Code": "SKU-A",
            "Invoice_Qty": 8,
            "SKU_Price": 100,
            "Line_Value": 800,
            "Status": "I",
        },
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R004",
            "Branch_Code": "BDG",
            "User_Code": "SLS02",
            "Invoice_No": "INV-003",
            "Invoice_Date": "03/01/2023",
            "SKU_Code": "SKU-C",
            "Invoice_Qty": 3,
            "SKU_Price": 100,
            "Line_Value": 300,
            "Status": "I",
        },
        {
            "Distributor_Code": "D01",
            "Retailer_Code": "R005",
            "Branch_Code": "JKT",
            "User_Code": "SLS03",
            "Invoice_No": "INV-004",
            "Invoice_Date": "bad date",
            "SKU_Code": "SKU-B",
            "Invoice_Qty": 1,
            "SKU_Price": 150,
            "Line_Value": 150,
            "Status": "I",
        },
    ]


@pytest.fixture
def sample_rows(sample_records: list[dict[str, Any]]) -> pd.DataFrame:
    """Normalized version of ``sample_records``."""
    return normalize_records(sample_records)
