"""
Configuration management for the Newspaper Viewer.

This module provides centralized configuration management using environment
variables and python-dotenv. It covers the publisher URL layout, the PDF
proxy, the page renderer and logging.

Environment variables are loaded from .env file or system environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

DEFAULT_BASE_URL = "https://www.nomo-norderney.de"
DEFAULT_PATH_TEMPLATE = "{base_url}/media/ausgaben/{year}/{month}/{prefix}_{date_token}.pdf"


@dataclass
class PublicationConfig:
    """
    Configuration for the publisher and its edition URL layout.

    The path template is a ``str.format`` pattern. Available fields are
    ``base_url``, ``year`` (4 digits), ``month`` and ``day`` (2 digits),
    ``prefix`` and ``date_token`` (``DD_MM_YYYY``).

    Attributes:
        base_url: Publisher origin without trailing slash.
        path_template: Template used to derive an edition URL from a date.
        display_name: Publication name used in edition titles.
        file_prefix: Filename prefix of the edition PDFs.
        lookback_days: How many days before today are probed (0 = today only).
        probe_timeout_ms: Timeout of a single existence probe in milliseconds.
        user_agent: User-Agent header sent with every publisher request.
    """

    base_url: str = DEFAULT_BASE_URL
    path_template: str = DEFAULT_PATH_TEMPLATE
    display_name: str = "Norderneyer Morgen"
    file_prefix: str = "nomo"
    lookback_days: int = 7
    probe_timeout_ms: int = 5000
    user_agent: str = "Mozilla/5.0 (compatible; NoMo-PDF-Viewer/1.0)"

    @classmethod
    def from_env(cls) -> "PublicationConfig":
        """
        Create PublicationConfig from environment variables.

        Returns:
            A configured PublicationConfig instance.

        Examples:
            >>> config = PublicationConfig.from_env()
            >>> config.lookback_days
            7
        """
        return cls(
            base_url=os.getenv("NEWSPAPER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            path_template=os.getenv("NEWSPAPER_PATH_TEMPLATE", DEFAULT_PATH_TEMPLATE),
            display_name=os.getenv("NEWSPAPER_DISPLAY_NAME", "Norderneyer Morgen"),
            file_prefix=os.getenv("NEWSPAPER_FILE_PREFIX", "nomo"),
            lookback_days=int(os.getenv("NEWSPAPER_LOOKBACK_DAYS", "7")),
            probe_timeout_ms=int(os.getenv("NEWSPAPER_PROBE_TIMEOUT_MS", "5000")),
            user_agent=os.getenv(
                "NEWSPAPER_USER_AGENT",
                "Mozilla/5.0 (compatible; NoMo-PDF-Viewer/1.0)",
            ),
        )

    @property
    def probe_timeout(self) -> float:
        """Probe timeout in seconds, as expected by requests."""
        return self.probe_timeout_ms / 1000.0

    @property
    def publisher_host(self) -> str:
        """Host name of the publisher origin (e.g. 'www.nomo-norderney.de')."""
        return urlparse(self.base_url).hostname or ""


@dataclass
class ProxyConfig:
    """
    Configuration for the same-origin PDF passthrough.

    Attributes:
        timeout: Upstream request timeout in seconds.
        chunk_size: Size of streamed chunks in bytes.
        restrict_to_publisher: Only allow URLs on the publisher host.
    """

    timeout: int = 30
    chunk_size: int = 8192
    restrict_to_publisher: bool = True

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """
        Create ProxyConfig from environment variables.

        Returns:
            A configured ProxyConfig instance.
        """
        return cls(
            timeout=int(os.getenv("PROXY_TIMEOUT", "30")),
            chunk_size=int(os.getenv("PROXY_CHUNK_SIZE", "8192")),
            restrict_to_publisher=os.getenv("PROXY_RESTRICT_TO_PUBLISHER", "true").lower() == "true",
        )


@dataclass
class ViewerConfig:
    """
    Configuration for server-side page rendering.

    Attributes:
        default_width: Page width in pixels when the client sends none.
        max_width: Upper bound for requested page widths.
        min_zoom: Smallest allowed zoom factor.
        max_zoom: Largest allowed zoom factor.
    """

    default_width: int = 800
    max_width: int = 1200
    min_zoom: float = 0.25
    max_zoom: float = 4.0

    @classmethod
    def from_env(cls) -> "ViewerConfig":
        """
        Create ViewerConfig from environment variables.

        Returns:
            A configured ViewerConfig instance.
        """
        return cls(
            default_width=int(os.getenv("VIEWER_DEFAULT_WIDTH", "800")),
            max_width=int(os.getenv("VIEWER_MAX_WIDTH", "1200")),
            min_zoom=float(os.getenv("VIEWER_MIN_ZOOM", "0.25")),
            max_zoom=float(os.getenv("VIEWER_MAX_ZOOM", "4.0")),
        )


@dataclass
class LogConfig:
    """
    Configuration for application logging.

    Controls logging behavior including log level, output format,
    and file rotation settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for log files.
        log_file: Name of the log file.
        max_bytes: Maximum size of a single log file before rotation.
        backup_count: Number of backup log files to keep.
        format_string: Log message format string.
        date_format: Date format for log timestamps.
        console_output: Whether to also output logs to console.
    """

    level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("data/logs"))
    log_file: str = "newspaper_viewer.log"
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True

    @classmethod
    def from_env(cls) -> "LogConfig":
        """
        Create LogConfig from environment variables.

        The log directory is created by setup_logging(), not here.

        Returns:
            A configured LogConfig instance.
        """
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(os.getenv("LOG_DIR", "data/logs")),
            log_file=os.getenv("LOG_FILE", "newspaper_viewer.log"),
            max_bytes=int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024))),  # 10 MB
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            format_string=os.getenv(
                "LOG_FORMAT",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            date_format=os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"),
            console_output=os.getenv("LOG_CONSOLE_OUTPUT", "true").lower() == "true",
        )


@dataclass
class Config:
    """
    Main configuration container for the Newspaper Viewer.

    This class aggregates all sub-configurations into a single convenient
    interface. It's typically created once per request or at startup using
    the from_env() class method.

    Attributes:
        publication: Publisher and edition URL configuration.
        proxy: PDF passthrough configuration.
        viewer: Page rendering configuration.
        log: Logging configuration.
    """

    publication: PublicationConfig = field(default_factory=PublicationConfig.from_env)
    proxy: ProxyConfig = field(default_factory=ProxyConfig.from_env)
    viewer: ViewerConfig = field(default_factory=ViewerConfig.from_env)
    log: LogConfig = field(default_factory=LogConfig.from_env)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config from environment variables.

        Returns:
            A fully configured Config instance.

        Examples:
            >>> config = Config.from_env()
            >>> config.publication.display_name
            'Norderneyer Morgen'
        """
        return cls(
            publication=PublicationConfig.from_env(),
            proxy=ProxyConfig.from_env(),
            viewer=ViewerConfig.from_env(),
            log=LogConfig.from_env(),
        )
