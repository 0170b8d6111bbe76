"""
Same-origin PDF passthrough.

Browsers refuse to load the publisher PDF directly from the viewer page
because of cross-origin restrictions. The proxy fetches the PDF server-side
and streams the bytes back with the upstream content headers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional
from urllib.parse import urlparse

import requests

from newspaper_viewer.config import ProxyConfig, PublicationConfig
from newspaper_viewer.editions.base import EditionErrorCode

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """
    Raised when a URL cannot be proxied.

    Attributes:
        message: Human-readable error message.
        code: Error category.
        status_code: HTTP status the API should answer with.
    """

    def __init__(
        self,
        message: str,
        code: EditionErrorCode = EditionErrorCode.NETWORK_ERROR,
        status_code: int = 502,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


@dataclass
class ProxiedPdf:
    """
    An open upstream PDF response.

    Attributes:
        chunks: Iterator over the body; closes the upstream connection when exhausted.
        content_type: Upstream Content-Type (defaults to application/pdf).
        content_length: Upstream Content-Length, if announced for an unencoded body.
    """

    chunks: Iterator[bytes]
    content_type: str = "application/pdf"
    content_length: Optional[str] = None


class PdfProxy:
    """
    Streams publisher PDFs through the backend.

    Typical usage:
        >>> proxy = PdfProxy(ProxyConfig.from_env(), PublicationConfig.from_env())
        >>> pdf = proxy.open_stream(url)
        >>> for chunk in pdf.chunks:
        ...     out.write(chunk)

    Attributes:
        config: Proxy configuration.
        publication: Publication configuration (allowed host and User-Agent).
    """

    def __init__(
        self,
        config: Optional[ProxyConfig] = None,
        publication: Optional[PublicationConfig] = None,
    ):
        self.config = config or ProxyConfig.from_env()
        self.publication = publication or PublicationConfig.from_env()

    def validate_url(self, url: str) -> str:
        """
        Check that the URL may be proxied.

        Args:
            url: Absolute URL requested by the client.

        Returns:
            The URL, stripped of surrounding whitespace.

        Raises:
            ProxyError: If the URL is not absolute http(s), or points away
                from the publisher while restrict_to_publisher is enabled.
        """
        url = (url or "").strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ProxyError(
                f"Invalid URL: {url!r}",
                code=EditionErrorCode.PARSING_ERROR,
                status_code=400,
            )

        if self.config.restrict_to_publisher:
            allowed = self.publication.publisher_host
            if parsed.hostname.lower() != allowed.lower():
                raise ProxyError(
                    f"Host not allowed: {parsed.hostname}",
                    code=EditionErrorCode.PARSING_ERROR,
                    status_code=400,
                )
        return url

    def _get(self, url: str, stream: bool) -> requests.Response:
        """Issue the upstream GET and map failures to ProxyError."""
        url = self.validate_url(url)
        try:
            response = requests.get(
                url,
                timeout=self.config.timeout,
                headers={"User-Agent": self.publication.user_agent},
                stream=stream,
            )
        except requests.RequestException as e:
            logger.error(f"Upstream request failed for {url}: {e}")
            raise ProxyError(f"Upstream request failed: {e}")

        if not 200 <= response.status_code < 300:
            response.close()
            logger.warning(f"Upstream answered HTTP {response.status_code} for {url}")
            raise ProxyError(
                f"Upstream answered HTTP {response.status_code}",
                code=EditionErrorCode.PDF_NOT_FOUND,
                status_code=404 if response.status_code == 404 else 502,
            )
        return response

    def open_stream(self, url: str) -> ProxiedPdf:
        """
        Open a streamed upstream response.

        Args:
            url: Absolute PDF URL.

        Returns:
            ProxiedPdf with a chunk iterator and content headers.

        Raises:
            ProxyError: On invalid URL, network failure or non-2xx upstream status.
        """
        response = self._get(url, stream=True)
        logger.info(f"Proxying {url} ({response.headers.get('Content-Length', '?')} bytes)")

        def iter_chunks() -> Iterator[bytes]:
            try:
                for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                    if chunk:
                        yield chunk
            finally:
                response.close()

        # iter_content() yields decoded bytes, so an encoded length would be wrong
        content_length = None
        if not response.headers.get("Content-Encoding"):
            content_length = response.headers.get("Content-Length")

        return ProxiedPdf(
            chunks=iter_chunks(),
            content_type=response.headers.get("Content-Type", "application/pdf"),
            content_length=content_length,
        )

    def fetch_bytes(self, url: str) -> bytes:
        """
        Download the whole PDF into memory.

        Args:
            url: Absolute PDF URL.

        Returns:
            The response body.

        Raises:
            ProxyError: On invalid URL, network failure or non-2xx upstream status.
        """
        response = self._get(url, stream=False)
        try:
            return response.content
        finally:
            response.close()
