"""
Edition and viewer Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import Optional


class NewspaperResponse(BaseModel):
    """Latest edition lookup result, as consumed by the viewer page."""

    success: bool
    pdf_url: Optional[str] = Field(None, alias="pdfUrl", description="Publisher URL of the PDF")
    proxy_url: Optional[str] = Field(None, alias="proxyUrl", description="Same-origin proxy URL")
    title: Optional[str] = None
    date: Optional[str] = Field(None, description="Edition date (DD.MM.YYYY)")
    error: Optional[str] = None
    code: Optional[str] = Field(None, description="Error category on failure")

    class Config:
        populate_by_name = True


class ViewerInfoResponse(BaseModel):
    """Page information for a proxied PDF."""

    page_count: int = Field(..., alias="pageCount", ge=1)
    has_navigation: bool = Field(..., alias="hasNavigation")

    class Config:
        populate_by_name = True
