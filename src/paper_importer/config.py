"""
Global configuration constants and import settings
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

# arXiv export API (Atom feed)
ARXIV_API_BASE = "http://export.arxiv.org/api/query"
ARXIV_PDF_BASE = "https://arxiv.org/pdf"

# Default vault folders
DEFAULT_PDF_FOLDER = "PDFs"
DEFAULT_NOTE_FOLDER = "Notes"

# User-Agent
DEFAULT_USER_AGENT = "paper-importer/1.0 (+https://arxiv.org/help/api)"

# Request timeouts (connect, read) in seconds
LOOKUP_TIMEOUT = (10, 15)
DOWNLOAD_TIMEOUT = (10, 60)


@dataclass
class ImportSettings:
    vault_path: Path = field(default_factory=lambda: Path('.'))
    pdf_folder: str = DEFAULT_PDF_FOLDER      # Vault folder for PDFs
    note_folder: str = DEFAULT_NOTE_FOLDER    # Vault folder for notes

    @classmethod
    def from_json(
        cls,
        path: Union[str, Path],
        vault_path: Optional[Union[str, Path]] = None,
    ) -> "ImportSettings":
        """
        Load settings from a plugin-style JSON file

        Recognized keys are "pdfFolder" and "noteFolder"; missing keys
        keep their defaults.

        Args:
            path: Settings file path
            vault_path: Vault root (defaults to the current directory)

        Returns:
            ImportSettings

        Raises:
            ValueError: If the file is not a JSON object or a folder is not a string
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")

        folders = {}
        for key, default in (('pdfFolder', DEFAULT_PDF_FOLDER), ('noteFolder', DEFAULT_NOTE_FOLDER)):
            value = data.get(key, default)
            if not isinstance(value, str):
                raise ValueError(f"{path}: {key} must be a string")
            folders[key] = value

        return cls(
            vault_path=Path(vault_path) if vault_path is not None else Path('.'),
            pdf_folder=folders['pdfFolder'],
            note_folder=folders['noteFolder'],
        )
