"""Filtering of scanned records."""

from typing import TYPE_CHECKING, Iterable

from ..utils.logging import get_logger

if TYPE_CHECKING:
    from .po_scanner import TranslationRecord

logger = get_logger(__name__)


def filter_records(records: Iterable["TranslationRecord"]) -> list["TranslationRecord"]:
    """Drop records with an empty source, such as the PO header block.

    Args:
        records: Records in file order

    Returns:
        Retained records, order preserved
    """
    kept = []
    dropped = 0

    for record in records:
        if record.source == "":
            dropped += 1
            continue
        kept.append(record)

    if dropped:
        logger.debug(f"Filtered {dropped} records with empty source")

    return kept
