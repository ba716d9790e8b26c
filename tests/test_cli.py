"""Tests for the po2csv command line."""

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "po2csv version" in result.stdout


def test_convert_file(sample_po_file):
    result = runner.invoke(app, ["convert", "file", str(sample_po_file)])

    assert result.exit_code == 0
    assert "File loaded and ready." in result.stdout
    assert "Success! Generated CSV with 3 rows." in result.stdout

    csv_path = sample_po_file.with_suffix(".csv")
    assert csv_path.read_text(encoding="utf-8").splitlines()[1] == "/greeting,Hello,Bonjour"


def test_convert_file_with_preview_and_output_dir(sample_po_file, tmp_path):
    output_dir = tmp_path / "csv"
    result = runner.invoke(
        app,
        ["convert", "file", str(sample_po_file), "-o", str(output_dir), "--preview"],
    )

    assert result.exit_code == 0
    assert "key,source,target" in result.stdout
    assert (output_dir / "messages.csv").exists()


def test_convert_empty_file(empty_po_file):
    result = runner.invoke(app, ["convert", "file", str(empty_po_file)])

    assert result.exit_code == 1
    assert "Error: No valid translation entries found." in result.stdout
    assert not empty_po_file.with_suffix(".csv").exists()


def test_convert_missing_file(tmp_path):
    result = runner.invoke(app, ["convert", "file", str(tmp_path / "missing.po")])

    assert result.exit_code == 1
    assert "Error: File not found" in result.stdout


def test_convert_with_config(sample_po_file, tmp_path):
    config_path = tmp_path / "po2csv.yaml"
    config_path.write_text(f"output:\n  dir: {tmp_path / 'configured'}\n")

    result = runner.invoke(
        app,
        ["convert", "file", str(sample_po_file), "--config", str(config_path)],
    )

    assert result.exit_code == 0
    assert (tmp_path / "configured" / "messages.csv").exists()


def test_preview_command(sample_po_file):
    result = runner.invoke(app, ["convert", "preview", str(sample_po_file), "-n", "2"])

    assert result.exit_code == 0
    assert "/greeting" in result.stdout
    assert "Showing 2 of 3 records" in result.stdout
    assert not sample_po_file.with_suffix(".csv").exists()


def test_preview_command_empty(empty_po_file):
    result = runner.invoke(app, ["convert", "preview", str(empty_po_file)])

    assert result.exit_code == 1
    assert "Error: No valid translation entries found." in result.stdout
