"""Shared fixtures for po2csv tests."""

import pytest

SAMPLE_PO = r'''# Translation of Example Project
msgid ""
msgstr ""
"Project-Id-Version: example\n"
"Content-Type: text/plain; charset=UTF-8\n"

#: src/menu.c:12
msgctxt ",greeting"
msgid "Hello"
msgstr "Bonjour"

msgctxt ",farewell"
msgid "Goodbye, friend"
msgstr "Au revoir, "
"mon ami"

msgctxt ",empty"
msgid ""
msgstr "ignored"

msgctxt "menu,file,open"
msgid ""
"Open a "
"file"
msgstr "Ouvrir un fichier"
'''


@pytest.fixture
def sample_po_text():
    """PO text with a header, three translated blocks and one empty block."""
    return SAMPLE_PO


@pytest.fixture
def sample_po_file(tmp_path):
    """Sample PO text written to disk."""
    po_path = tmp_path / "messages.po"
    po_path.write_text(SAMPLE_PO, encoding="utf-8")
    return po_path


@pytest.fixture
def empty_po_file(tmp_path):
    """PO file containing only a header and comments."""
    po_path = tmp_path / "empty.po"
    po_path.write_text('# nothing here\nmsgid ""\nmsgstr ""\n', encoding="utf-8")
    return po_path
