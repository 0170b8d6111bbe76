"""
Pydantic models for API requests and responses.
"""

from .edition import (
    NewspaperResponse,
    ViewerInfoResponse,
)

__all__ = [
    "NewspaperResponse",
    "ViewerInfoResponse",
]
