from unittest.mock import MagicMock

import pytest
import requests

from paper_importer.core.downloader import PDFDownloader
from paper_importer.core.errors import NetworkError

PDF_BYTES = b"%PDF-1.5\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n"


def _downloader(status_code: int = 200, content: bytes = PDF_BYTES) -> PDFDownloader:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(str(status_code))
    session = MagicMock()
    session.get.return_value = response
    return PDFDownloader(session=session)


def test_fetch_bytes() -> None:
    downloader = _downloader()
    assert downloader.fetch_bytes("https://arxiv.org/pdf/2301.12345") == PDF_BYTES
    downloader.session.get.assert_called_once()


def test_html_body_rejected() -> None:
    downloader = _downloader(content=b"<!DOCTYPE html><html><body>Sign in</body></html>")
    with pytest.raises(NetworkError, match="HTML instead of PDF"):
        downloader.fetch_bytes("https://arxiv.org/pdf/2301.12345")


def test_garbage_body_rejected() -> None:
    with pytest.raises(NetworkError, match="Invalid PDF header"):
        _downloader(content=b"\x00\x01\x02\x03").fetch_bytes("http://x/p.pdf")


def test_empty_body_rejected() -> None:
    with pytest.raises(NetworkError, match="Empty response"):
        _downloader(content=b"").fetch_bytes("http://x/p.pdf")


@pytest.mark.parametrize("status_code", [403, 404, 500])
def test_http_errors(status_code: int) -> None:
    with pytest.raises(NetworkError):
        _downloader(status_code=status_code).fetch_bytes("http://x/p.pdf")


def test_timeout_is_network_error() -> None:
    downloader = _downloader()
    downloader.session.get.side_effect = requests.exceptions.Timeout()

    with pytest.raises(NetworkError, match="Timeout"):
        downloader.fetch_bytes("http://x/p.pdf")


def test_single_attempt_only() -> None:
    downloader = _downloader()
    downloader.session.get.side_effect = requests.exceptions.ConnectionError()

    with pytest.raises(NetworkError):
        downloader.fetch_bytes("http://x/p.pdf")
    assert downloader.session.get.call_count == 1
