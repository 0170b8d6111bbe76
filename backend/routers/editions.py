"""
Editions router.

Resolves the most recent published edition for the viewer page.
"""

import logging

from fastapi import APIRouter, Depends

from backend.dependencies import get_edition_resolver
from backend.models.edition import NewspaperResponse
from newspaper_viewer.editions import EditionResolver, build_proxy_url

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/latest", response_model=NewspaperResponse, response_model_exclude_none=True)
def get_latest_edition(resolver: EditionResolver = Depends(get_edition_resolver)):
    """
    Get the latest available edition.

    Probes up to eight days back, most recent first. Failures are reported
    in the body with success=false rather than as an HTTP error, so the
    viewer can show its retry page.

    Returns:
        The resolution record, with proxyUrl set on success.
    """
    result = resolver.resolve_latest_edition()
    payload = result.to_dict()

    if result.success:
        payload["proxyUrl"] = build_proxy_url(result.url)
        logger.info(f"Latest edition: {result.title}")
    else:
        logger.warning(f"No edition available: {result.reason}")

    return NewspaperResponse(**payload)
