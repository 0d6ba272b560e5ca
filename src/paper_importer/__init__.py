"""
arXiv Paper Importer

Imports a paper from an arXiv ID or URL into a Markdown vault:
- the PDF, filed under a configurable folder
- a note with front matter (ID, title, authors, dates, abstract, comments)
  linking to the PDF
"""

__version__ = "1.0.0"

from .config import ImportSettings
from .core import (
    PaperImportError,
    InvalidIdentifier,
    LookupFailed,
    AssetFetchFailed,
    WriteFailed,
    PaperRecord,
    ImportResult,
    extract_arxiv_id,
    sanitize_filename,
    render_note,
)
from .importer import PaperImporter
