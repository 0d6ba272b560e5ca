"""
Utility functions for vault paths and file names
"""

import re
import unicodedata

# Characters rejected by at least one common file system
ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\?%*:|"<>]')


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename by replacing illegal characters with spaces

    Args:
        filename: Original filename

    Returns:
        Sanitized filename (may be empty)
    """
    # Replace illegal characters
    filename = ILLEGAL_FILENAME_CHARS.sub(' ', filename)

    # Remove multiple spaces
    return re.sub(r'\s+', ' ', filename).strip()


def normalize_path(path: str) -> str:
    """
    Normalize a vault-relative path

    Backslashes become slashes, repeated slashes collapse, and leading or
    trailing slashes are dropped. Non-breaking spaces become plain
    spaces and the text is NFC-normalized. The vault root is "/".

    Args:
        path: Raw path

    Returns:
        Normalized slash-separated path
    """
    path = path.replace('\u00a0', ' ').replace('\u202f', ' ')
    path = unicodedata.normalize('NFC', path)
    path = re.sub(r'[\\/]+', '/', path)
    path = path.strip('/')
    return path or '/'


def join_path(folder: str, filename: str) -> str:
    """
    Join a vault folder and a file name into a normalized path

    Args:
        folder: Vault-relative folder ("/" for the vault root)
        filename: File name inside the folder

    Returns:
        Normalized path
    """
    folder = normalize_path(folder)
    if folder == '/':
        return normalize_path(filename)
    return normalize_path(f"{folder}/{filename}")
