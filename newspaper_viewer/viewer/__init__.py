"""
Viewer shell: pagination state and server-side page rendering.
"""

from newspaper_viewer.viewer.document import PdfDocument, PdfRenderError
from newspaper_viewer.viewer.pagination import Pagination

__all__ = [
    "Pagination",
    "PdfDocument",
    "PdfRenderError",
]
