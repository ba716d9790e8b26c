"""PO file parsing module."""

from .po_scanner import Field, POScanner, TranslationRecord, parse_po, parse_po_file
from .record_filter import filter_records

__all__ = [
    "Field",
    "POScanner",
    "TranslationRecord",
    "parse_po",
    "parse_po_file",
    "filter_records",
]
