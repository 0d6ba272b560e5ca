"""
PDF downloader with response validation
"""

import logging
from typing import Optional

import requests

from ..config import DOWNLOAD_TIMEOUT
from .errors import NetworkError
from .session import SessionManager

logger = logging.getLogger(__name__)


class PDFDownloader:
    """Fetches PDF files into memory"""

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize downloader

        Args:
            session: Optional requests session to use
        """
        self.session = session or SessionManager().create_session()

    def fetch_bytes(self, url: str) -> bytes:
        """
        Download a PDF

        Args:
            url: PDF URL

        Returns:
            PDF content

        Raises:
            NetworkError: On transport errors, HTTP errors, or a non-PDF body
        """
        logger.debug(f"Fetching PDF: {url}")

        try:
            response = self.session.get(
                url,
                timeout=DOWNLOAD_TIMEOUT,
                allow_redirects=True,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to download {url}: {type(e).__name__}") from e

        if response.status_code == 404:
            raise NetworkError(f"PDF not found: {url}")

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise NetworkError(f"Failed to download {url}: HTTP {response.status_code}") from e

        content = response.content
        if not content:
            raise NetworkError(f"Empty response from {url}")

        # Check it's a PDF
        if not self.looks_like_pdf(content):
            preview = content[:500].decode('utf-8', errors='ignore').lower()
            if '<html' in preview or '<!doctype' in preview:
                raise NetworkError(f"Received HTML instead of PDF from {url}")
            raise NetworkError(f"Invalid PDF header from {url}")

        logger.debug(f"Downloaded {len(content)} bytes")
        return content

    @staticmethod
    def looks_like_pdf(content: bytes) -> bool:
        """Check for the PDF magic header"""
        return content[:4] == b'%PDF'
