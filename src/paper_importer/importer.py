"""
Paper import: arXiv lookup, PDF download and note creation
"""

import logging
from typing import Callable, Optional

from .config import ImportSettings
from .core.downloader import PDFDownloader
from .core.errors import (
    AssetFetchFailed,
    LookupFailed,
    NetworkError,
    PaperNotFound,
    WriteFailed,
)
from .core.identifier import extract_arxiv_id
from .core.models import ImportResult, PaperRecord
from .core.storage import VaultStore
from .core.template import render_note
from .core.utils import join_path, normalize_path, sanitize_filename
from .services.arxiv import ArxivClient

logger = logging.getLogger(__name__)


class PaperImporter:
    """
    Imports a single arXiv paper into a vault

    Collaborators:
    - lookup: object with lookup(arxiv_id) -> PaperRecord
    - fetcher: object with fetch_bytes(url) -> bytes
    - store: object with folder_exists/create_folder/write_bytes/write_text
    - opener: optional callable taking a note path

    Partial imports are not rolled back: a PDF stays in place when the
    note write fails. Re-importing overwrites both files.
    """

    def __init__(
        self,
        settings: ImportSettings,
        lookup=None,
        fetcher=None,
        store=None,
        opener: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize importer

        Args:
            settings: Vault location and target folders
            lookup: Metadata lookup (defaults to ArxivClient)
            fetcher: PDF fetcher (defaults to PDFDownloader)
            store: File store (defaults to VaultStore on settings.vault_path)
            opener: Note opener called by open_note
        """
        self.settings = settings
        self.lookup = lookup or ArxivClient()
        self.fetcher = fetcher or PDFDownloader()
        self.store = store or VaultStore(settings.vault_path)
        self.opener = opener

    def import_paper(self, text: str) -> ImportResult:
        """
        Import a paper from an arXiv ID or URL

        Args:
            text: User input (ID, arXiv:ID, or arxiv.org abs/pdf URL)

        Returns:
            ImportResult with vault paths of the note and the PDF

        Raises:
            InvalidIdentifier: Input is not a recognized ID or URL
            LookupFailed: Metadata lookup failed
            AssetFetchFailed: PDF download failed
            WriteFailed: Folder creation or file write failed
        """
        arxiv_id = extract_arxiv_id(text)
        logger.info(f"Importing paper {arxiv_id}...")

        paper = self._lookup(arxiv_id)
        logger.info(f"Found: {paper.title[:60]}")

        pdf_path = self._save_pdf(paper)
        note_path = self._save_note(paper, pdf_path)

        logger.info("Paper imported!")
        return ImportResult(note_path=note_path, pdf_path=pdf_path)

    def open_note(self, result: ImportResult) -> None:
        """Hand the imported note to the note opener, if any"""
        if self.opener is not None:
            self.opener(result.note_path)

    def _lookup(self, arxiv_id: str) -> PaperRecord:
        try:
            return self.lookup.lookup(arxiv_id)
        except PaperNotFound as e:
            raise LookupFailed(f"arXiv paper {arxiv_id} not found") from e
        except NetworkError as e:
            raise LookupFailed(f"Could not look up {arxiv_id}: {e}") from e

    def _ensure_folder(self, folder: str) -> str:
        """
        Create a vault folder if missing

        Args:
            folder: Configured folder path

        Returns:
            Normalized folder path
        """
        folder = normalize_path(folder)
        if folder == '/':
            return folder

        try:
            if not self.store.folder_exists(folder):
                self.store.create_folder(folder)
        except OSError as e:
            raise WriteFailed(f"Could not create folder {folder}: {e}") from e

        return folder

    def _save_pdf(self, paper: PaperRecord) -> str:
        folder = self._ensure_folder(self.settings.pdf_folder)
        filename = sanitize_filename(f"{paper.title} ({paper.paper_id}).pdf")
        pdf_path = join_path(folder, filename)

        try:
            content = self.fetcher.fetch_bytes(paper.pdf_url)
        except NetworkError as e:
            raise AssetFetchFailed(f"Could not download PDF: {e}") from e

        try:
            self.store.write_bytes(pdf_path, content)
        except OSError as e:
            raise WriteFailed(f"Could not write {pdf_path}: {e}") from e

        logger.info(f"Saved PDF: {pdf_path}")
        return pdf_path

    def _save_note(self, paper: PaperRecord, pdf_path: str) -> str:
        folder = self._ensure_folder(self.settings.note_folder)
        filename = sanitize_filename(f"{paper.title} ({paper.paper_id}).md")
        note_path = join_path(folder, filename)

        content = render_note(paper, pdf_path)

        try:
            self.store.write_text(note_path, content)
        except OSError as e:
            raise WriteFailed(f"Could not write {note_path}: {e}") from e

        logger.info(f"Saved note: {note_path}")
        return note_path
