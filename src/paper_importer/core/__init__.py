"""
Core modules for paper importing
"""

from .errors import (
    PaperImportError,
    InvalidIdentifier,
    LookupFailed,
    AssetFetchFailed,
    WriteFailed,
    NetworkError,
    PaperNotFound,
)
from .identifier import extract_arxiv_id, is_arxiv_id
from .models import PaperRecord, ImportResult
from .utils import sanitize_filename, normalize_path, join_path
from .template import NOTE_TEMPLATE, render_note
from .session import SessionManager
from .downloader import PDFDownloader
from .storage import VaultStore
