"""CSV export module."""

from .csv_writer import COLUMNS, records_to_csv, write_csv

__all__ = [
    "COLUMNS",
    "records_to_csv",
    "write_csv",
]
