"""Top-level PO to CSV conversion action."""

import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional

from .config import ConverterConfig
from .export import records_to_csv, write_csv
from .parser import TranslationRecord, parse_po
from .utils.logging import get_logger

logger = get_logger(__name__)

BOM = "\ufeff"
LOADED_STATUS = "File loaded and ready."
EMPTY_INPUT_MESSAGE = "No valid translation entries found."

PO_SUFFIX_PATTERN = re.compile(r"\.po$", re.IGNORECASE)


class ConversionError(Exception):
    """Base class for conversion failures."""


class EmptyInputError(ConversionError):
    """Raised when parsing yields no records."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


@dataclass
class ConversionResult:
    """Outcome of a successful conversion."""

    records: list[TranslationRecord]
    csv_text: str
    output_filename: str
    preview: str
    output_path: Optional[Path] = None

    @property
    def row_count(self) -> int:
        """Number of data rows in the CSV."""
        return len(self.records)

    @property
    def status(self) -> str:
        """Status line shown after a successful conversion."""
        return f"Success! Generated CSV with {self.row_count} rows."


def status_for_error(error: BaseException) -> str:
    """Status line shown after a failed conversion."""
    return f"Error: {error}"


def output_filename_for(filename: str | Path) -> str:
    """Derive the CSV file name from the PO file name.

    Only a trailing ``.po`` (any case) is removed; directory parts are dropped.
    """
    name = PurePath(str(filename).replace("\\", "/")).name
    return PO_SUFFIX_PATTERN.sub("", name) + ".csv"


def load_po_text(po_path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read a PO file as text.

    Args:
        po_path: Path to the PO file
        encoding: Text encoding; undecodable bytes are replaced

    Returns:
        File contents
    """
    po_path = Path(po_path)
    text = po_path.read_text(encoding=encoding, errors="replace")
    logger.info(f"Loaded {po_path.name} ({len(text)} chars)")
    return text


def convert_text(
    content: str,
    filename: str = "translations.po",
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """Convert PO text to CSV text.

    Args:
        content: Full PO file text
        filename: Original file name, used for the output name
        config: Converter configuration (defaults if None)

    Returns:
        ConversionResult with CSV text and preview

    Raises:
        EmptyInputError: If no translation entries were found
    """
    config = config or ConverterConfig()

    # A leading BOM is not part of the first line
    records = parse_po(content.removeprefix(BOM))
    if not records:
        raise EmptyInputError()

    csv_text = records_to_csv(records)

    return ConversionResult(
        records=records,
        csv_text=csv_text,
        output_filename=output_filename_for(filename),
        preview=csv_text[: config.preview_chars],
    )


def convert_file(
    po_path: str | Path,
    output_dir: Optional[str | Path] = None,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """Convert a PO file on disk and write the CSV.

    The CSV is written next to the input file unless an output directory is
    given, either here or in the config. Nothing is written on failure.

    Args:
        po_path: Path to the PO file
        output_dir: Directory for the CSV file
        config: Converter configuration (defaults if None)

    Returns:
        ConversionResult with output_path set
    """
    config = config or ConverterConfig()
    po_path = Path(po_path)

    try:
        content = load_po_text(po_path, encoding=config.encoding)
        result = convert_text(content, filename=po_path.name, config=config)

        target_dir = Path(output_dir or config.output_dir or po_path.parent)
        result.output_path = write_csv(result.csv_text, target_dir / result.output_filename)
    except Exception as e:
        logger.error(f"Conversion of {po_path.name} failed: {e}")
        raise

    logger.info(f"Converted {po_path.name}: {result.row_count} rows -> {result.output_path}")
    return result
