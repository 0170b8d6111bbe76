"""
Result types for edition resolution.

A resolution either finds an edition (EditionFound) or reports why none
could be found (EditionNotFound). Both serialize to the record consumed by
the viewer frontend: ``{success, pdfUrl?, title?, date?, error?}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union
from urllib.parse import quote

PROXY_ENDPOINT = "/api/pdf-proxy"


class EditionErrorCode(str, Enum):
    """Error categories reported to the viewer."""

    NETWORK_ERROR = "NETWORK_ERROR"
    PARSING_ERROR = "PARSING_ERROR"
    PDF_NOT_FOUND = "PDF_NOT_FOUND"


@dataclass(frozen=True)
class EditionFound:
    """
    A published edition that responded to an existence probe.

    Attributes:
        url: Absolute URL of the edition PDF on the publisher site.
        title: Display title, e.g. 'Norderneyer Morgen - 05.03.2024'.
        display_date: Edition date formatted as DD.MM.YYYY.
        edition_date: Calendar date of the edition.
    """

    url: str
    title: str
    display_date: str
    edition_date: date

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict:
        """
        Convert the result to the viewer record.

        Returns:
            Dictionary with success, pdfUrl, title and date keys.
        """
        return {
            "success": True,
            "pdfUrl": self.url,
            "title": self.title,
            "date": self.display_date,
        }


@dataclass(frozen=True)
class EditionNotFound:
    """
    Terminal failure of a resolution.

    Attributes:
        reason: User-facing error message, never empty.
        code: Error category.
    """

    reason: str
    code: EditionErrorCode = EditionErrorCode.PDF_NOT_FOUND

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """
        Convert the result to the viewer record.

        Returns:
            Dictionary with success, error and code keys.
        """
        return {
            "success": False,
            "error": self.reason,
            "code": self.code.value,
        }


ResolutionResult = Union[EditionFound, EditionNotFound]


def build_proxy_url(pdf_url: str, endpoint: str = PROXY_ENDPOINT) -> str:
    """
    Wrap an absolute PDF URL as a query parameter of the passthrough endpoint.

    Args:
        pdf_url: Absolute URL of the PDF.
        endpoint: Same-origin proxy path.

    Returns:
        Relative proxy URL.

    Examples:
        >>> build_proxy_url("https://example.org/a b.pdf")
        '/api/pdf-proxy?url=https%3A%2F%2Fexample.org%2Fa%20b.pdf'
    """
    return f"{endpoint}?url={quote(pdf_url, safe='')}"
