import pytest

from paper_importer.core.models import PaperRecord


class RecordingStore:
    """In-memory file store that records every call"""

    def __init__(self, existing_folders=()):
        self.folders = set(existing_folders)
        self.files = {}
        self.calls = []

    def folder_exists(self, path):
        self.calls.append(('folder_exists', path))
        return path in self.folders

    def create_folder(self, path):
        self.calls.append(('create_folder', path))
        self.folders.add(path)

    def write_bytes(self, path, data):
        self.calls.append(('write_bytes', path))
        self.files[path] = data

    def write_text(self, path, text):
        self.calls.append(('write_text', path))
        self.files[path] = text


@pytest.fixture
def sample_paper() -> PaperRecord:
    return PaperRecord(
        paper_id="2301.12345",
        title="Test Paper",
        authors=("A", "B"),
        abstract="...",
        comments="",
        date="2023-01-15",
        pdf_url="http://x/p.pdf",
    )


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()
