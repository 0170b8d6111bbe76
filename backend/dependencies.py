"""
Dependency injection for FastAPI backend.

Provides configuration, resolver and proxy instances as dependencies so
tests can replace them through app.dependency_overrides.
"""

from fastapi import Depends

from newspaper_viewer.config import Config
from newspaper_viewer.editions import EditionResolver
from newspaper_viewer.proxy import PdfProxy


def get_config() -> Config:
    """
    Get application configuration.

    Configuration is read from the environment on every request; nothing
    is cached between requests.
    """
    return Config.from_env()


def get_edition_resolver() -> EditionResolver:
    """
    Get EditionResolver instance.

    The resolver reads its publication settings itself, inside its error
    boundary, so a malformed setting yields a NotFound result rather than
    a server error.

    Returns:
        EditionResolver for the current request.
    """
    return EditionResolver()


def get_pdf_proxy(config: Config = Depends(get_config)) -> PdfProxy:
    """
    Get PdfProxy instance.

    Args:
        config: Application configuration from dependency injection.

    Returns:
        PdfProxy for the current request.
    """
    return PdfProxy(config.proxy, config.publication)
