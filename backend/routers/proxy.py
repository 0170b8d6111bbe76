"""
PDF proxy router.

Streams publisher PDFs through the backend to satisfy cross-origin
restrictions in the browser.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from backend.dependencies import get_pdf_proxy
from newspaper_viewer.proxy import PdfProxy, ProxyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/pdf-proxy")
def proxy_pdf(
    url: str = Query(..., description="Absolute URL of the PDF to relay"),
    proxy: PdfProxy = Depends(get_pdf_proxy),
):
    """
    Relay a PDF from the publisher.

    Args:
        url: Absolute PDF URL.

    Returns:
        Streamed PDF with upstream content headers.
    """
    try:
        pdf = proxy.open_stream(url)
    except ProxyError as e:
        logger.error(f"Failed to proxy {url}: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    headers = {
        "Content-Disposition": "inline",
        "Cache-Control": "no-store",
    }
    if pdf.content_length:
        headers["Content-Length"] = pdf.content_length

    return StreamingResponse(pdf.chunks, media_type=pdf.content_type, headers=headers)
