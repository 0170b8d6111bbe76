"""
Edition resolution: candidate dates, existence probes and the resolver.
"""

from newspaper_viewer.editions.base import (
    EditionErrorCode,
    EditionFound,
    EditionNotFound,
    ResolutionResult,
    build_proxy_url,
)
from newspaper_viewer.editions.prober import EditionProber
from newspaper_viewer.editions.resolver import (
    EditionResolver,
    resolve_latest_edition,
)

__all__ = [
    "EditionErrorCode",
    "EditionFound",
    "EditionNotFound",
    "ResolutionResult",
    "build_proxy_url",
    "EditionProber",
    "EditionResolver",
    "resolve_latest_edition",
]
