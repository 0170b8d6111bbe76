"""
Viewer router.

Page count and rendered page images for a proxied PDF. The PDF is fetched
fresh on every request.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from backend.dependencies import get_config, get_pdf_proxy
from backend.models.edition import ViewerInfoResponse
from newspaper_viewer.config import Config
from newspaper_viewer.proxy import PdfProxy, ProxyError
from newspaper_viewer.viewer import Pagination, PdfDocument, PdfRenderError

logger = logging.getLogger(__name__)

router = APIRouter()


def _open_document(url: str, proxy: PdfProxy, config: Config) -> PdfDocument:
    """Download and open a PDF, translating failures into HTTP errors."""
    try:
        data = proxy.fetch_bytes(url)
    except ProxyError as e:
        logger.error(f"Failed to fetch {url}: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    try:
        return PdfDocument.from_bytes(data, config.viewer)
    except PdfRenderError as e:
        logger.error(f"Failed to open {url}: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/info", response_model=ViewerInfoResponse)
def get_document_info(
    url: str = Query(..., description="Absolute URL of the PDF"),
    proxy: PdfProxy = Depends(get_pdf_proxy),
    config: Config = Depends(get_config),
):
    """
    Get the page count of a PDF.

    Returns:
        pageCount and whether navigation controls are needed.
    """
    with _open_document(url, proxy, config) as document:
        pagination = Pagination(document.page_count)

    return ViewerInfoResponse(
        pageCount=pagination.page_count,
        hasNavigation=pagination.has_navigation,
    )


@router.get("/page")
def render_page(
    url: str = Query(..., description="Absolute URL of the PDF"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    zoom: Optional[float] = Query(None, gt=0, description="Zoom factor"),
    width: Optional[int] = Query(None, gt=0, description="Target width in pixels"),
    proxy: PdfProxy = Depends(get_pdf_proxy),
    config: Config = Depends(get_config),
):
    """
    Render one page of a PDF as PNG.

    Args:
        url: Absolute PDF URL.
        page: Page number.
        zoom: Zoom factor; takes precedence over width.
        width: Target pixel width.

    Returns:
        PNG image.
    """
    with _open_document(url, proxy, config) as document:
        try:
            png = document.render_page(page, zoom=zoom, width=width)
        except PdfRenderError as e:
            logger.warning(f"Cannot render page {page} of {url}: {e}")
            raise HTTPException(status_code=404, detail=str(e))

    return Response(content=png, media_type="image/png", headers={"Cache-Control": "no-store"})
