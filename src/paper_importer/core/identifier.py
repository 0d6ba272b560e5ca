"""
arXiv identifier extraction from user input
"""

import re

from .errors import InvalidIdentifier

# Tried in order against the whole input, first match wins.
# The ID is always the last group.
ARXIV_ID_PATTERNS = (
    re.compile(r'arXiv:([0-9]{4}\.[0-9]{4,5})'),
    re.compile(r'([0-9]{4}\.[0-9]{4,5})'),
    re.compile(r'(https?://)?(www\.)?arxiv\.org/(abs|pdf)/([0-9]{4}\.[0-9]{4,5})'),
)


def extract_arxiv_id(text: str) -> str:
    """
    Extract the canonical arXiv ID from an ID or URL

    Accepted forms:
        2301.12345
        arXiv:2301.12345
        [http(s)://][www.]arxiv.org/abs/2301.12345
        [http(s)://][www.]arxiv.org/pdf/2301.12345

    Args:
        text: Raw user input

    Returns:
        arXiv ID (e.g., "2301.12345")

    Raises:
        InvalidIdentifier: If the input matches none of the forms
    """
    for pattern in ARXIV_ID_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return match.group(match.lastindex)

    raise InvalidIdentifier("Invalid arXiv ID or URL")


def is_arxiv_id(text: str) -> bool:
    """Check whether text is accepted by extract_arxiv_id"""
    try:
        extract_arxiv_id(text)
    except InvalidIdentifier:
        return False
    return True
