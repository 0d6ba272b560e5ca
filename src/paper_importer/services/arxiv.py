"""
arXiv API client for paper metadata
"""

import logging
import re
import xml.etree.ElementTree as ET
from typing import Optional

import requests

from ..config import ARXIV_API_BASE, ARXIV_PDF_BASE, LOOKUP_TIMEOUT
from ..core.errors import NetworkError, PaperNotFound
from ..core.models import PaperRecord
from ..core.session import SessionManager

logger = logging.getLogger(__name__)

NAMESPACES = {
    'atom': 'http://www.w3.org/2005/Atom',
    'arxiv': 'http://arxiv.org/schemas/atom',
}


class ArxivClient:
    """Client for arXiv API"""

    API_BASE = ARXIV_API_BASE
    HEADERS = {
        'Accept': 'application/atom+xml',
    }

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize client

        Args:
            session: Optional requests session to use
        """
        self.session = session or SessionManager().create_session()

    def lookup(self, arxiv_id: str) -> PaperRecord:
        """
        Get paper metadata by arXiv ID

        Args:
            arxiv_id: arXiv ID (e.g., "2301.12345")

        Returns:
            PaperRecord

        Raises:
            PaperNotFound: If arXiv has no such paper
            NetworkError: If the API is unreachable or answers garbage
        """
        params = {
            'id_list': arxiv_id,
            'max_results': 1,
        }

        logger.debug(f"Querying arXiv API for {arxiv_id}")
        try:
            response = self.session.get(
                self.API_BASE,
                params=params,
                headers=self.HEADERS,
                timeout=LOOKUP_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"arXiv API request failed: {type(e).__name__}") from e

        if response.status_code != 200:
            raise NetworkError(f"arXiv API returned HTTP {response.status_code}")

        return self.parse_feed(response.content, arxiv_id)

    def parse_feed(self, content: bytes, arxiv_id: str) -> PaperRecord:
        """
        Parse an Atom feed holding a single paper

        Args:
            content: Raw feed XML
            arxiv_id: Requested arXiv ID

        Returns:
            PaperRecord
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise NetworkError(f"Malformed arXiv API response: {e}") from e

        entry = root.find('atom:entry', NAMESPACES)
        if entry is None:
            raise PaperNotFound(f"Paper not found: {arxiv_id}")

        entry_id = self._text(entry, 'atom:id')
        title = self._text(entry, 'atom:title')

        # Malformed IDs come back as an error entry
        if '/api/errors' in entry_id or not title:
            raise PaperNotFound(f"Paper not found: {arxiv_id}")

        authors = tuple(
            self._clean(name.text)
            for name in entry.findall('atom:author/atom:name', NAMESPACES)
            if name.text
        )

        return PaperRecord(
            paper_id=self._extract_arxiv_id(entry_id) or arxiv_id,
            title=self._clean(title),
            authors=authors,
            abstract=self._clean(self._text(entry, 'atom:summary')),
            comments=self._clean(self._text(entry, 'arxiv:comment')),
            date=self._text(entry, 'atom:published').strip(),
            pdf_url=self._pdf_url(entry) or f"{ARXIV_PDF_BASE}/{arxiv_id}",
        )

    @staticmethod
    def _text(entry: ET.Element, path: str) -> str:
        elem = entry.find(path, NAMESPACES)
        if elem is None or elem.text is None:
            return ''
        return elem.text

    @staticmethod
    def _clean(text: str) -> str:
        """Collapse the line wrapping used in Atom text fields"""
        return ' '.join(text.split())

    @staticmethod
    def _pdf_url(entry: ET.Element) -> Optional[str]:
        for link in entry.findall('atom:link', NAMESPACES):
            if link.get('title') == 'pdf':
                pdf_url = link.get('href')
                if pdf_url:
                    # arXiv redirects http to https
                    return re.sub(r'^http://', 'https://', pdf_url)
        return None

    @staticmethod
    def _extract_arxiv_id(url: str) -> Optional[str]:
        """
        Extract arXiv ID from entry URL, dropping the version suffix

        Args:
            url: Entry ID URL (e.g., "http://arxiv.org/abs/2301.12345v2")

        Returns:
            arXiv ID or None
        """
        match = re.search(r'([0-9]{4}\.[0-9]{4,5})(v[0-9]+)?$', url)
        if match:
            return match.group(1)
        return None
