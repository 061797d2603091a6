"""Column layout of the transaction row set.

The row set is a DataFrame whose columns use the field names of the
distributor sales export. This module is the single place listing them.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from sales_core.exceptions import DataQualityError

DISTRIBUTOR_CODE = "Distributor_Code"
RETAILER_CODE = "Retailer_Code"
BRANCH_CODE = "Branch_Code"
USER_CODE = "User_Code"
INVOICE_NO = "Invoice_No"
INVOICE_DATE = "Invoice_Date"
SKU_CODE = "SKU_Code"
BATCH_CODE = "Batch_Code"
UOM = "UOM"
INVOICE_QTY = "Invoice_Qty"
SKU_PRICE = "SKU_Price"
LINE_VALUE = "Line_Value"
SKU_WEIGHT = "Sku_Weight"
TOTAL_AMOUNT = "Total_Amount"
NET_AMOUNT = "Net_Amount"
TOTAL_DISCOUNT = "Total_Discount"
TOTAL_TAX = "Total_Tax"
TOTAL_RETURN = "Total_Return"
TOTAL_WEIGHT = "Total_Weight"
TOTAL_LINES = "Total_Lines"
STATUS = "Status"
DELIVERY_STATUS = "Delivery_Status"

# Text fields: codes and labels, compared as strings
TEXT_FIELDS = [
    DISTRIBUTOR_CODE,
    RETAILER_CODE,
    BRANCH_CODE,
    USER_CODE,
    INVOICE_NO,
    SKU_CODE,
    BATCH_CODE,
    UOM,
    STATUS,
    DELIVERY_STATUS,
]

# Numeric fields: quantities, prices, amounts and weights
NUMERIC_FIELDS = [
    INVOICE_QTY,
    SKU_PRICE,
    LINE_VALUE,
    SKU_WEIGHT,
    TOTAL_AMOUNT,
    NET_AMOUNT,
    TOTAL_DISCOUNT,
    TOTAL_TAX,
    TOTAL_RETURN,
    TOTAL_WEIGHT,
    TOTAL_LINES,
]

# Columns without which a file is not a transaction export
REQUIRED_FIELDS = [INVOICE_NO, LINE_VALUE, STATUS]

# Export column order
ALL_FIELDS = [
    DISTRIBUTOR_CODE,
    RETAILER_CODE,
    BRANCH_CODE,
    USER_CODE,
    INVOICE_NO,
    INVOICE_DATE,
    SKU_CODE,
    BATCH_CODE,
    UOM,
    INVOICE_QTY,
    SKU_PRICE,
    LINE_VALUE,
    SKU_WEIGHT,
    TOTAL_AMOUNT,
    NET_AMOUNT,
    TOTAL_DISCOUNT,
    TOTAL_TAX,
    TOTAL_RETURN,
    TOTAL_WEIGHT,
    TOTAL_LINES,
    STATUS,
    DELIVERY_STATUS,
]


def require_columns(frame: pd.DataFrame, columns: Iterable[str]) -> None:
    """Raise DataQualityError if any of ``columns`` is missing from ``frame``.

    Args:
        frame: Row set to check.
        columns: Column names the caller depends on.

    Raises:
        DataQualityError: Listing every missing column.
    """
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise DataQualityError(
            f"Missing required column(s): {', '.join(missing)}. "
            f"Available columns: {', '.join(map(str, frame.columns))}"
        )
