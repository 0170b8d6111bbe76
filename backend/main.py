"""
Newspaper Viewer FastAPI Application.

Main application entry point with CORS, static files, and router registration.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from backend.routers import (
    editions_router,
    proxy_router,
    viewer_router,
)
from newspaper_viewer.config import Config
from newspaper_viewer.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once at startup."""
    setup_logging(Config.from_env().log)
    yield


app = FastAPI(
    title="Newspaper Viewer API",
    description="Latest edition lookup, PDF passthrough and page rendering",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

static_dir = Path(__file__).parent / "static" / "frontend"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir), html=True), name="static")

app.include_router(editions_router, prefix="/api/editions", tags=["editions"])
app.include_router(proxy_router, prefix="/api", tags=["proxy"])
app.include_router(viewer_router, prefix="/api/viewer", tags=["viewer"])


@app.get("/")
async def root():
    """Root endpoint - redirect to the viewer page."""
    return RedirectResponse(url="/static/index.html", status_code=302)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
