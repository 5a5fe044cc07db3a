"""Simple HTTP GET downloads into memory or onto disk."""

from __future__ import annotations

import urllib.error
import urllib.request
import zlib
from pathlib import Path

DEFAULT_FILE_NAME = "fileDownloaded"


class DownloadError(Exception):
    """Raised when a transfer cannot be carried out."""


def _inflate(body: bytes) -> bytes:
    """Undo a ``deflate`` content encoding, zlib-wrapped or raw."""
    try:
        return zlib.decompress(body)
    except zlib.error:
        try:
            return zlib.decompress(body, -zlib.MAX_WBITS)
        except zlib.error as exc:
            raise DownloadError(f"cannot decode deflate body: {exc}") from exc


class HTTPDownloader:
    """Fetches URLs with GET, following redirects and accepting deflate.

    As with a plain transfer, an HTTP error status is not a failure: the
    body the server sent is what comes back. Failures to connect or to
    understand the URL raise :class:`DownloadError`.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def _fetch(self, url: str) -> bytes:
        request = urllib.request.Request(url, headers={"Accept-Encoding": "deflate"})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                body = response.read()
                encoding = response.headers.get("Content-Encoding", "")
        except urllib.error.HTTPError as exc:
            body = exc.read()
            encoding = exc.headers.get("Content-Encoding", "") if exc.headers else ""
            exc.close()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise DownloadError(f"download of {url!r} failed: {exc}") from exc
        if encoding.strip().lower() == "deflate":
            body = _inflate(body)
        return body

    def download(self, url: str) -> str:
        """Return the body found at ``url`` as text."""
        return self._fetch(url).decode("utf-8", errors="replace")

    def download_to_file(self, url: str, name: str = DEFAULT_FILE_NAME) -> Path:
        """Save the body found at ``url`` into the file ``name``."""
        target = Path(name)
        try:
            handle = target.open("wb")
        except OSError as exc:
            raise DownloadError(f"cannot open {name!r} for writing: {exc}") from exc
        with handle:
            handle.write(self._fetch(url))
        return target