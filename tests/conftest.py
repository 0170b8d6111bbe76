"""
pytest configuration and fixtures for Newspaper Viewer tests.

This module provides shared fixtures for all test modules. No fixture
touches the network: probes and upstream requests are always mocked.
"""

import sys
from datetime import datetime
from pathlib import Path

import fitz
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from newspaper_viewer.config import (
    Config,
    LogConfig,
    ProxyConfig,
    PublicationConfig,
    ViewerConfig,
)

FAKE_ORIGIN = "https://zeitung.example"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep log files out of the working tree and ignore a local .env."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    for var in (
        "NEWSPAPER_BASE_URL",
        "NEWSPAPER_PATH_TEMPLATE",
        "NEWSPAPER_DISPLAY_NAME",
        "NEWSPAPER_FILE_PREFIX",
        "NEWSPAPER_LOOKBACK_DAYS",
        "NEWSPAPER_PROBE_TIMEOUT_MS",
        "PROXY_RESTRICT_TO_PUBLISHER",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def publication_config():
    """Publication configuration pointing at a fake origin."""
    return PublicationConfig(
        base_url=FAKE_ORIGIN,
        display_name="Norderneyer Morgen",
        file_prefix="nomo",
    )


@pytest.fixture
def viewer_config():
    """Viewer configuration with the default limits."""
    return ViewerConfig()


@pytest.fixture
def config(publication_config, viewer_config, tmp_path):
    """Full configuration built without reading the environment."""
    return Config(
        publication=publication_config,
        proxy=ProxyConfig(),
        viewer=viewer_config,
        log=LogConfig(log_dir=tmp_path / "logs", console_output=False),
    )


@pytest.fixture
def now():
    """A fixed wall-clock timestamp: Tuesday 5 March 2024, 09:30."""
    return datetime(2024, 3, 5, 9, 30)


@pytest.fixture
def sample_pdf_bytes():
    """A three-page A4 PDF generated in memory."""
    doc = fitz.open()
    for i in range(3):
        page = doc.new_page(width=595, height=842)
        page.insert_text((72, 72), f"Seite {i + 1}")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def single_page_pdf_bytes():
    """A one-page PDF generated in memory."""
    doc = fitz.open()
    doc.new_page(width=595, height=842)
    data = doc.tobytes()
    doc.close()
    return data
