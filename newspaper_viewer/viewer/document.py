"""
PDF page rendering with PyMuPDF.

The viewer does not ship a client-side PDF engine. Pages are rendered to
PNG on the server at the zoom factor (or pixel width) requested by the
client, so the browser only has to display images.
"""

from __future__ import annotations

import logging
from typing import Optional

import fitz  # PyMuPDF

from newspaper_viewer.config import ViewerConfig

logger = logging.getLogger(__name__)


class PdfRenderError(Exception):
    """Raised when a PDF cannot be opened or a page cannot be rendered."""


class PdfDocument:
    """
    An in-memory PDF opened with PyMuPDF.

    Typical usage:
        >>> document = PdfDocument.from_bytes(pdf_bytes)
        >>> document.page_count
        24
        >>> png = document.render_page(1, width=900)

    Attributes:
        config: Viewer configuration (zoom and width limits).
    """

    def __init__(self, doc: "fitz.Document", config: Optional[ViewerConfig] = None):
        self._doc = doc
        self.config = config or ViewerConfig()

    @classmethod
    def from_bytes(cls, data: bytes, config: Optional[ViewerConfig] = None) -> "PdfDocument":
        """
        Open a PDF from raw bytes.

        Args:
            data: PDF file content.
            config: Viewer configuration.

        Returns:
            A PdfDocument instance.

        Raises:
            PdfRenderError: If the data is empty or not a readable PDF.
        """
        if not data:
            raise PdfRenderError("Empty PDF document")
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise PdfRenderError(f"Failed to open PDF: {e}")

        # MuPDF opens arbitrary bytes (e.g. an HTML error page) as a document
        if not doc.is_pdf:
            doc.close()
            raise PdfRenderError("Data is not a PDF document")

        if doc.page_count < 1:
            doc.close()
            raise PdfRenderError("PDF document has no pages")
        return cls(doc, config)

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def close(self) -> None:
        self._doc.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def clamp_zoom(self, zoom: float) -> float:
        """Clamp a zoom factor to the configured limits."""
        return max(self.config.min_zoom, min(self.config.max_zoom, zoom))

    def zoom_for_width(self, page_number: int, width: int) -> float:
        """
        Compute the zoom factor that renders a page at the given pixel width.

        Widths above max_width are reduced to max_width.

        Args:
            page_number: 1-indexed page number.
            width: Target width in pixels.

        Returns:
            Zoom factor (1.0 = 72 dpi).
        """
        page = self._load_page(page_number)
        target = min(max(1, width), self.config.max_width)
        return target / page.rect.width

    def _load_page(self, page_number: int) -> "fitz.Page":
        if not 1 <= page_number <= self.page_count:
            raise PdfRenderError(
                f"Page {page_number} out of range (1-{self.page_count})"
            )
        return self._doc.load_page(page_number - 1)

    def render_page(
        self,
        page_number: int,
        zoom: Optional[float] = None,
        width: Optional[int] = None,
    ) -> bytes:
        """
        Render one page to PNG.

        An explicit zoom takes precedence over width. Without either, the
        page is fitted to the configured default width.

        Args:
            page_number: 1-indexed page number.
            zoom: Zoom factor.
            width: Target pixel width.

        Returns:
            PNG image bytes.

        Raises:
            PdfRenderError: If the page is out of range or rendering fails.
        """
        page = self._load_page(page_number)
        if zoom is None:
            zoom = self.zoom_for_width(page_number, width or self.config.default_width)
        zoom = self.clamp_zoom(zoom)

        try:
            pixmap = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom))
            png = pixmap.tobytes("png")
        except Exception as e:
            raise PdfRenderError(f"Failed to render page {page_number}: {e}")

        logger.debug(
            f"Rendered page {page_number}/{self.page_count} at zoom {zoom:.2f} "
            f"({pixmap.width}x{pixmap.height})"
        )
        return png
