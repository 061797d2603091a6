"""Domain-specific exceptions for the sales tracking engine.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from SalesCoreError for easy catching.
"""


class SalesCoreError(Exception):
    """Base exception for all sales_core errors.

    Users can catch this exception to handle any error raised by the
    package. The aggregators themselves never raise it for dirty data.
    """

    pass


class ConfigError(SalesCoreError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - More focus-product slots are given than the matrix supports
    - The branch filter is blank instead of a code or the "All" sentinel
    """

    pass


class DataQualityError(SalesCoreError):
    """Raised when a caller explicitly requires columns that are missing.

    The aggregators fill absent columns with defaults, so this is only
    raised by ``require_columns``.
    """

    pass


class LoadError(SalesCoreError):
    """Raised when a transaction source file cannot be decoded.

    This exception is raised when:
    - The file does not exist
    - The extension is not a supported spreadsheet or delimited-text format
    - The underlying reader fails (corrupt workbook, bad encoding)
    """

    pass
