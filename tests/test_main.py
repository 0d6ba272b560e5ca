import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from paper_importer.core.errors import LookupFailed
from paper_importer.core.models import ImportResult
from paper_importer.main import cli, open_in_obsidian


def test_no_command_prints_help(capsys) -> None:
    assert cli([]) == 1
    assert "usage" in capsys.readouterr().out


def test_extract(capsys) -> None:
    assert cli(["extract", " https://arxiv.org/abs/2301.12345 "]) == 0
    assert capsys.readouterr().out.strip().endswith("2301.12345")


def test_extract_invalid() -> None:
    assert cli(["extract", "not an id"]) == 1


def test_import(tmp_path: Path, capsys) -> None:
    result = ImportResult(
        note_path="Notes/Test Paper (2301.12345).md",
        pdf_path="PDFs/Test Paper (2301.12345).pdf",
    )
    with patch("paper_importer.main.PaperImporter") as importer_cls:
        importer_cls.return_value.import_paper.return_value = result
        code = cli(["import", "2301.12345", "--vault", str(tmp_path), "--pdf-folder", "Papers/PDF"])

    assert code == 0
    settings = importer_cls.call_args.args[0]
    assert settings.vault_path == tmp_path
    assert settings.pdf_folder == "Papers/PDF"
    assert settings.note_folder == "Notes"
    importer_cls.return_value.open_note.assert_called_once_with(result)
    assert "Notes/Test Paper (2301.12345).md" in capsys.readouterr().out


def test_import_with_config(tmp_path: Path) -> None:
    config = tmp_path / "data.json"
    config.write_text(json.dumps({"pdfFolder": "A", "noteFolder": "B"}), encoding="utf-8")

    with patch("paper_importer.main.PaperImporter") as importer_cls:
        importer_cls.return_value.import_paper.return_value = ImportResult("B/x.md", "A/x.pdf")
        code = cli(["import", "2301.12345", "--config", str(config), "--note-folder", "C"])

    assert code == 0
    settings = importer_cls.call_args.args[0]
    assert settings.pdf_folder == "A"
    assert settings.note_folder == "C"


def test_import_missing_config(tmp_path: Path) -> None:
    assert cli(["import", "2301.12345", "--config", str(tmp_path / "nope.json")]) == 1


def test_import_failure_exit_code() -> None:
    with patch("paper_importer.main.PaperImporter") as importer_cls:
        importer_cls.return_value.import_paper.side_effect = LookupFailed("arXiv paper 2301.99999 not found")
        assert cli(["import", "2301.99999"]) == 1
    importer_cls.return_value.open_note.assert_not_called()


def test_open_in_obsidian(tmp_path: Path) -> None:
    vault = tmp_path / "My Vault"
    vault.mkdir()

    with patch("paper_importer.main.webbrowser.open") as browser_open:
        open_in_obsidian(vault, "Notes/Test Paper (2301.12345).md")

    browser_open.assert_called_once_with(
        "obsidian://open?vault=My%20Vault&file=Notes/Test%20Paper%20%282301.12345%29.md"
    )


def test_import_malformed_config(tmp_path: Path) -> None:
    config = tmp_path / "data.json"
    config.write_text('["PDFs"]', encoding="utf-8")

    with patch("paper_importer.main.PaperImporter") as importer_cls:
        assert cli(["import", "2301.12345", "--config", str(config)]) == 1
    importer_cls.assert_not_called()


def test_import_null_folder_in_config(tmp_path: Path) -> None:
    config = tmp_path / "data.json"
    config.write_text(json.dumps({"pdfFolder": None}), encoding="utf-8")

    with patch("paper_importer.main.PaperImporter") as importer_cls:
        assert cli(["import", "2301.12345", "--config", str(config)]) == 1
    importer_cls.assert_not_called()
