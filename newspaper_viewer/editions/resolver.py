"""
Latest edition resolution.

The resolver walks the lookback window from today backwards, probing one
candidate URL at a time, and returns the first edition that exists. Probes
run strictly sequentially so that the most recent date always wins and no
request is issued after the first hit.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from newspaper_viewer.config import PublicationConfig
from newspaper_viewer.editions.base import (
    EditionErrorCode,
    EditionFound,
    EditionNotFound,
    ResolutionResult,
)
from newspaper_viewer.editions.dates import (
    build_edition_url,
    candidate_dates,
    format_display_date,
)
from newspaper_viewer.editions.prober import EditionProber

logger = logging.getLogger(__name__)

NO_EDITION_MESSAGE = "Keine aktuelle Zeitung gefunden"
GENERIC_ERROR_MESSAGE = "Fehler beim Laden der Zeitung"


class EditionResolver:
    """
    Finds the most recent edition within the lookback window.

    The resolver is the error boundary of the edition lookup: it always
    returns an EditionFound or EditionNotFound and never raises.

    Typical usage:
        >>> resolver = EditionResolver(PublicationConfig.from_env())
        >>> result = resolver.resolve_latest_edition()
        >>> if result.success:
        ...     print(result.title, result.url)

    Attributes:
        config: Publication configuration, or None to read the environment.
        probe: Callable answering whether a URL exists.
    """

    def __init__(
        self,
        config: Optional[PublicationConfig] = None,
        probe: Optional[Callable[[str], bool]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            config: Publication configuration. If None, it is loaded from the
                environment on each resolution, so a malformed setting is
                reported as EditionNotFound instead of raising here.
            probe: Existence check for a URL. Defaults to EditionProber.probe_exists.
        """
        self.config = config
        self.probe = probe

    @staticmethod
    def build_title(config: PublicationConfig, display_date: str) -> str:
        """Compose the edition title, e.g. 'Norderneyer Morgen - 05.03.2024'."""
        return f"{config.display_name} - {display_date}"

    def resolve_latest_edition(self, now: Optional[datetime] = None) -> ResolutionResult:
        """
        Resolve the latest available edition.

        Args:
            now: Current timestamp. Defaults to datetime.now() (local time).

        Returns:
            EditionFound for the first candidate that exists, otherwise
            EditionNotFound with a user-facing reason.
        """
        try:
            config = self.config or PublicationConfig.from_env()
            probe = self.probe or EditionProber(config).probe_exists
            if now is None:
                now = datetime.now()

            for offset, candidate in enumerate(
                candidate_dates(now, config.lookback_days)
            ):
                url = build_edition_url(candidate, config)
                logger.info(f"Checking edition {offset} day(s) back: {url}")

                if probe(url):
                    display_date = format_display_date(candidate)
                    logger.info(f"Found edition for {display_date}: {url}")
                    return EditionFound(
                        url=url,
                        title=self.build_title(config, display_date),
                        display_date=display_date,
                        edition_date=candidate,
                    )

            logger.warning(
                f"No edition found within {config.lookback_days + 1} candidate days"
            )
            return EditionNotFound(
                reason=NO_EDITION_MESSAGE,
                code=EditionErrorCode.PDF_NOT_FOUND,
            )

        except Exception as e:
            logger.error(f"Error resolving latest edition: {e}")
            return EditionNotFound(
                reason=str(e) or GENERIC_ERROR_MESSAGE,
                code=EditionErrorCode.PARSING_ERROR,
            )


def resolve_latest_edition(
    now: Optional[datetime] = None,
    config: Optional[PublicationConfig] = None,
    probe: Optional[Callable[[str], bool]] = None,
) -> ResolutionResult:
    """
    Convenience wrapper around EditionResolver.resolve_latest_edition().

    Args:
        now: Current timestamp. Defaults to datetime.now().
        config: Publication configuration. If None, loads from environment.
        probe: Existence check for a URL.

    Returns:
        The resolution result.
    """
    return EditionResolver(config, probe).resolve_latest_edition(now)
