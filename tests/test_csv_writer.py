"""Tests for CSV emission."""

import csv
import io

from src.po2csv.export import COLUMNS, records_to_csv, write_csv
from src.po2csv.parser import TranslationRecord, parse_po


def test_header_only_for_no_records():
    assert records_to_csv([]) == "key,source,target"


def test_no_terminator_after_last_row():
    csv_text = records_to_csv([TranslationRecord("/a", "A", "a"), TranslationRecord("/b", "B", "b")])

    assert csv_text == "key,source,target\r\n/a,A,a\r\n/b,B,b"


def test_trailing_line_break_in_last_field_is_kept():
    csv_text = records_to_csv([TranslationRecord("/k", "s", "t\r\n")])

    assert csv_text.endswith('"t\r\n"')


def test_round_trip_line():
    records = parse_po('msgctxt ",greeting"\nmsgid "Hello"\nmsgstr "Bonjour"\n')

    lines = records_to_csv(records).splitlines()

    assert lines == ["key,source,target", "/greeting,Hello,Bonjour"]


def test_quoting():
    record = TranslationRecord("/k", "a, b", 'say "hi"')

    assert records_to_csv([record]).splitlines()[1] == '/k,"a, b","say ""hi"""'


def test_line_break_is_quoted():
    record = TranslationRecord("/k", "one\ntwo", "")
    csv_text = records_to_csv([record])

    assert '"one\ntwo"' in csv_text
    rows = list(csv.DictReader(io.StringIO(csv_text, newline="")))
    assert rows == [{"key": "/k", "source": "one\ntwo", "target": ""}]


def test_sample_columns(sample_po_text):
    csv_text = records_to_csv(parse_po(sample_po_text))
    rows = list(csv.reader(io.StringIO(csv_text, newline="")))

    assert rows[0] == COLUMNS
    assert rows[2] == ["/farewell", "Goodbye, friend", "Au revoir, mon ami"]
    assert rows[3] == ["/menufile,open", "Open a file", "Ouvrir un fichier"]


def test_write_csv(tmp_path):
    csv_text = records_to_csv([TranslationRecord("/k", "Café", "Kaffee")])
    output_path = write_csv(csv_text, tmp_path / "out" / "messages.csv")

    assert output_path.read_bytes() == csv_text.encode("utf-8")
