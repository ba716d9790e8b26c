"""Line scanner for gettext PO files.

The scanner walks a PO file one line at a time and groups ``msgctxt``,
``msgid`` and ``msgstr`` lines into :class:`TranslationRecord` objects.
It does not validate PO grammar: anything it does not recognise is skipped.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..utils.logging import get_logger
from .record_filter import filter_records

logger = get_logger(__name__)

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


class Field(Enum):
    """The record field that continuation lines are appended to."""

    NONE = "none"
    KEY = "key"
    SOURCE = "source"
    TARGET = "target"


@dataclass(frozen=True)
class TranslationRecord:
    """A single sealed key/source/target row."""

    key: str = ""  # Cleaned msgctxt, "" when the block has none
    source: str = ""  # msgid plus continuation lines
    target: str = ""  # msgstr plus continuation lines

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "source": self.source,
            "target": self.target,
        }


class POScanner:
    """Single-pass scanner turning PO lines into translation records.

    Records are sealed lazily: a block is only emitted when the next
    ``msgctxt`` line arrives or the input ends, and only if its source
    text is non-empty.
    """

    CONTEXT_PREFIX = 'msgctxt "'
    MSGID_PREFIX = 'msgid "'
    MSGSTR_PREFIX = 'msgstr "'

    # Greedy captures up to the last quote; line separators never match
    QUOTED_TEXT = r'"([^\r\n\u2028\u2029]*)"'
    CONTEXT_PATTERN = re.compile(r"msgctxt\s+" + QUOTED_TEXT)
    MSGID_PATTERN = re.compile(r"msgid\s+" + QUOTED_TEXT)
    MSGSTR_PATTERN = re.compile(r"msgstr\s+" + QUOTED_TEXT)
    CONTINUATION_PATTERN = re.compile(QUOTED_TEXT)

    def __init__(self):
        """Initialize the scanner with an empty record."""
        self._reset()
        self.current_field = Field.NONE

    def _reset(self) -> None:
        self._values = {Field.KEY: "", Field.SOURCE: "", Field.TARGET: ""}

    @property
    def current(self) -> TranslationRecord:
        """Snapshot of the record under construction."""
        return TranslationRecord(
            key=self._values[Field.KEY],
            source=self._values[Field.SOURCE],
            target=self._values[Field.TARGET],
        )

    def feed(self, line: str) -> Optional[TranslationRecord]:
        """Process one line without its terminator.

        Args:
            line: Raw line from the PO file

        Returns:
            The record sealed by this line, if any
        """
        trimmed = line.strip()

        if trimmed.startswith(self.CONTEXT_PREFIX):
            sealed = self._seal()
            if sealed is None and any(self._values.values()):
                logger.debug(f"Dropping record without source: {self.current}")
            self._reset()

            match = self.CONTEXT_PATTERN.search(line)
            if match and match.group(1):
                self._values[Field.KEY] = "/" + match.group(1).replace(",", "", 1)
            self.current_field = Field.KEY
            return sealed

        if trimmed.startswith(self.MSGID_PREFIX):
            self._values[Field.SOURCE] = self._extract(self.MSGID_PATTERN, line)
            self.current_field = Field.SOURCE
        elif trimmed.startswith(self.MSGSTR_PREFIX):
            self._values[Field.TARGET] = self._extract(self.MSGSTR_PATTERN, line)
            self.current_field = Field.TARGET
        elif trimmed.startswith('"') and self.current_field in (Field.SOURCE, Field.TARGET):
            match = self.CONTINUATION_PATTERN.fullmatch(line)
            if match:
                self._values[self.current_field] += match.group(1)

        return None

    def finish(self) -> Optional[TranslationRecord]:
        """Seal the last record once the input is exhausted."""
        sealed = self._seal()
        self._reset()
        self.current_field = Field.NONE
        return sealed

    def scan_lines(self, lines: Iterable[str]) -> Iterator[TranslationRecord]:
        """Scan lines lazily, yielding records as they are sealed.

        Lines may carry their ``\\n`` or ``\\r\\n`` terminator, as produced
        by iterating over a file opened with ``newline="\\n"``.

        Args:
            lines: Iterable of PO lines

        Yields:
            Sealed TranslationRecord objects in file order
        """
        self._reset()
        self.current_field = Field.NONE

        for line in lines:
            sealed = self.feed(_strip_terminator(line))
            if sealed is not None:
                yield sealed

        sealed = self.finish()
        if sealed is not None:
            yield sealed

    def _seal(self) -> Optional[TranslationRecord]:
        if not self._values[Field.SOURCE]:
            return None
        return self.current

    @staticmethod
    def _extract(pattern: re.Pattern, line: str) -> str:
        match = pattern.fullmatch(line)
        return match.group(1) if match else ""


def _strip_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n``, leaving a lone ``\\r`` alone."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_lines(content: str) -> list[str]:
    """Split PO text on ``\\n`` and ``\\r\\n`` boundaries."""
    return LINE_SPLIT_PATTERN.split(content)


def parse_po(content: str) -> list[TranslationRecord]:
    """Parse PO text into records, dropping the header block.

    Args:
        content: Full text of a PO file

    Returns:
        Records with non-empty source text, in file order
    """
    return filter_records(POScanner().scan_lines(split_lines(content)))


def parse_po_file(
    po_path: str | Path,
    encoding: str = "utf-8-sig",
) -> list[TranslationRecord]:
    """Parse a PO file from disk without loading it in one piece.

    Args:
        po_path: Path to the PO file
        encoding: Text encoding; undecodable bytes are replaced

    Returns:
        Records with non-empty source text, in file order
    """
    logger.debug(f"Scanning: {po_path}")
    with open(po_path, encoding=encoding, errors="replace", newline="\n") as f:
        return filter_records(POScanner().scan_lines(f))
