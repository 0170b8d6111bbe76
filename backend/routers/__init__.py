"""
FastAPI routers for API endpoints.
"""

from .editions import router as editions_router
from .proxy import router as proxy_router
from .viewer import router as viewer_router

__all__ = [
    "editions_router",
    "proxy_router",
    "viewer_router",
]
