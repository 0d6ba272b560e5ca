"""
Paper metadata and import result containers
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PaperRecord:
    """Paper metadata as returned by the arXiv API"""
    paper_id: str
    title: str
    authors: Tuple[str, ...] = ()
    abstract: str = ""
    comments: str = ""
    date: str = ""      # Free-form, usually ISO timestamp
    pdf_url: str = ""


@dataclass(frozen=True)
class ImportResult:
    """Vault-relative paths of the files written by an import"""
    note_path: str
    pdf_path: str
