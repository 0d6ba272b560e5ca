"""
Vault-backed file store
"""

import logging
from pathlib import Path
from typing import Union

from .utils import normalize_path

logger = logging.getLogger(__name__)


class VaultStore:
    """
    Reads and writes files inside a vault directory

    All paths are normalized, slash-separated and relative to the vault
    root. Errors from the file system propagate as OSError.
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize store

        Args:
            root: Vault root directory
        """
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        """
        Map a vault path onto the local file system

        Args:
            path: Vault-relative path

        Returns:
            Local path under the vault root

        Raises:
            PermissionError: If the path has a ".." segment
        """
        path = normalize_path(path)
        if path == '/':
            return self.root

        parts = path.split('/')
        if '..' in parts:
            raise PermissionError(f"Path leaves the vault: {path}")
        return self.root.joinpath(*parts)

    def folder_exists(self, path: str) -> bool:
        return self.resolve(path).is_dir()

    def create_folder(self, path: str) -> None:
        """Create folder and any missing parents; existing folders are fine"""
        self.resolve(path).mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created folder: {path}")

    def write_bytes(self, path: str, data: bytes) -> None:
        target = self.resolve(path)
        target.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes: {path}")

    def write_text(self, path: str, text: str) -> None:
        target = self.resolve(path)
        with open(target, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.debug(f"Wrote note: {path}")
