"""
Existence checks for edition PDFs.

A probe issues a single HEAD request and never downloads the body. Any
outcome other than HTTP 200 is reported as "does not exist"; the prober
never raises.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from newspaper_viewer.config import PublicationConfig

logger = logging.getLogger(__name__)


class EditionProber:
    """
    HEAD-based existence prober for publisher URLs.

    Typical usage:
        >>> prober = EditionProber(PublicationConfig.from_env())
        >>> prober.probe_exists("https://www.nomo-norderney.de/media/ausgaben/2024/03/nomo_05_03_2024.pdf")
        False

    Attributes:
        config: Publication configuration (timeout and User-Agent).
    """

    def __init__(self, config: Optional[PublicationConfig] = None):
        """
        Initialize the prober.

        Args:
            config: Publication configuration. If None, loads from environment.
        """
        self.config = config or PublicationConfig.from_env()

    @property
    def headers(self) -> dict:
        """Request headers identifying this client to the publisher."""
        return {"User-Agent": self.config.user_agent}

    def probe_exists(self, url: str) -> bool:
        """
        Check whether a resource exists at the URL.

        No retries: a failed probe is final for this call.

        Args:
            url: Fully-qualified URL to check.

        Returns:
            True only if the server answered with HTTP 200.
        """
        try:
            response = requests.head(
                url,
                timeout=self.config.probe_timeout,
                headers=self.headers,
                allow_redirects=True,
            )
        except requests.Timeout:
            logger.debug(f"Probe timed out after {self.config.probe_timeout}s: {url}")
            return False
        except requests.RequestException as e:
            logger.debug(f"Probe failed for {url}: {e}")
            return False
        except Exception as e:
            logger.warning(f"Unexpected probe failure for {url}: {e}")
            return False

        logger.debug(f"Probe {url} -> HTTP {response.status_code}")
        return response.status_code == 200
