"""
Unit tests for pagination and PyMuPDF page rendering.
"""

import pytest

from newspaper_viewer.config import ViewerConfig
from newspaper_viewer.viewer import Pagination, PdfDocument, PdfRenderError
from tests.test_utils import png_size


class TestPagination:
    """Tests for Pagination."""

    def test_navigation_only_for_multiple_pages(self):
        assert Pagination(page_count=1).has_navigation is False
        assert Pagination(page_count=2).has_navigation is True

    def test_empty_document_rejected(self):
        with pytest.raises(ValueError):
            Pagination(page_count=0)


class TestPdfDocument:
    """Tests for PdfDocument."""

    def test_page_count(self, sample_pdf_bytes):
        with PdfDocument.from_bytes(sample_pdf_bytes) as document:
            assert document.page_count == 3

    def test_render_png_at_width(self, sample_pdf_bytes):
        """A requested width is turned into a fitting zoom factor."""
        with PdfDocument.from_bytes(sample_pdf_bytes) as document:
            width, height = png_size(document.render_page(2, width=600))

        assert abs(width - 600) <= 1
        assert height > width

    def test_render_default_width(self, sample_pdf_bytes):
        with PdfDocument.from_bytes(sample_pdf_bytes, ViewerConfig(default_width=400)) as document:
            width, _ = png_size(document.render_page(1))

        assert abs(width - 400) <= 1

    def test_width_limited_to_max_width(self, sample_pdf_bytes):
        with PdfDocument.from_bytes(sample_pdf_bytes) as document:
            width, _ = png_size(document.render_page(1, width=5000))

        assert abs(width - 1200) <= 1

    def test_zoom_takes_precedence(self, sample_pdf_bytes):
        with PdfDocument.from_bytes(sample_pdf_bytes) as document:
            width, _ = png_size(document.render_page(1, zoom=1.0, width=300))

        assert width == 595

    def test_zoom_clamped(self, sample_pdf_bytes):
        config = ViewerConfig(min_zoom=0.5, max_zoom=2.0)
        with PdfDocument.from_bytes(sample_pdf_bytes, config) as document:
            assert document.clamp_zoom(10.0) == 2.0
            assert document.clamp_zoom(0.1) == 0.5
            width, _ = png_size(document.render_page(1, zoom=10.0))

        assert width == 1190

    @pytest.mark.parametrize("page_number", [0, 4])
    def test_page_out_of_range(self, sample_pdf_bytes, page_number):
        with PdfDocument.from_bytes(sample_pdf_bytes) as document:
            with pytest.raises(PdfRenderError, match="out of range"):
                document.render_page(page_number)

    def test_empty_data_rejected(self):
        with pytest.raises(PdfRenderError):
            PdfDocument.from_bytes(b"")

    def test_garbage_rejected(self):
        with pytest.raises(PdfRenderError):
            PdfDocument.from_bytes(b"<html>Not Found</html>")

    def test_html_error_page_rejected(self):
        page = (
            b"<!DOCTYPE html>\n<html><head><title>404</title></head>"
            b"<body><h1>Seite nicht gefunden</h1></body></html>\n"
        )
        with pytest.raises(PdfRenderError, match="not a PDF"):
            PdfDocument.from_bytes(page)
