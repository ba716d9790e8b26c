"""CSV serialization of translation records."""

import csv
import io
from pathlib import Path
from typing import Iterable

from ..parser.po_scanner import TranslationRecord
from ..utils.logging import get_logger

logger = get_logger(__name__)

COLUMNS = ["key", "source", "target"]


def records_to_csv(records: Iterable[TranslationRecord]) -> str:
    """Serialize records to CSV text with a header row.

    Fields containing commas, quotes or line breaks are quoted and
    embedded quotes are doubled. Rows are joined with CRLF and the last
    row has no terminator.

    Args:
        records: Records to write, in order

    Returns:
        CSV text
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS, lineterminator="\r\n")
    writer.writeheader()
    for record in records:
        writer.writerow(record.to_dict())
    return buffer.getvalue().removesuffix("\r\n")


def write_csv(csv_text: str, output_path: Path) -> Path:
    """Write CSV text to a UTF-8 file, byte for byte.

    Args:
        csv_text: Output of records_to_csv
        output_path: Destination file

    Returns:
        The path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(csv_text)

    logger.debug(f"Wrote {output_path}")
    return output_path
