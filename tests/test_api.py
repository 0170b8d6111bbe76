"""
API tests for the FastAPI backend.

Dependencies are replaced through app.dependency_overrides; upstream
requests are mocked so no test touches the network.
"""

from datetime import date
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from backend.dependencies import get_config, get_edition_resolver, get_pdf_proxy
from backend.main import app
from newspaper_viewer.editions import EditionErrorCode, EditionFound, EditionNotFound
from newspaper_viewer.proxy import PdfProxy, ProxyError
from tests.test_utils import make_response, png_size

PDF_URL = "https://zeitung.example/media/ausgaben/2024/03/nomo_05_03_2024.pdf"


@pytest.fixture
def client(config):
    """Test client with configuration pinned to the fake origin."""
    app.dependency_overrides[get_config] = lambda: config
    yield TestClient(app)
    app.dependency_overrides.clear()


def override_resolver(result):
    resolver = Mock()
    resolver.resolve_latest_edition.return_value = result
    app.dependency_overrides[get_edition_resolver] = lambda: resolver
    return resolver


def override_proxy_bytes(data=None, error=None):
    proxy = Mock(spec=PdfProxy)
    if error is not None:
        proxy.fetch_bytes.side_effect = error
    else:
        proxy.fetch_bytes.return_value = data
    app.dependency_overrides[get_pdf_proxy] = lambda: proxy
    return proxy


class TestEditionsEndpoint:
    """Tests for GET /api/editions/latest."""

    def test_latest_found(self, client):
        override_resolver(EditionFound(
            url=PDF_URL,
            title="Norderneyer Morgen - 05.03.2024",
            display_date="05.03.2024",
            edition_date=date(2024, 3, 5),
        ))

        response = client.get("/api/editions/latest")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "pdfUrl": PDF_URL,
            "proxyUrl": "/api/pdf-proxy?url=https%3A%2F%2Fzeitung.example%2Fmedia%2Fausgaben"
                        "%2F2024%2F03%2Fnomo_05_03_2024.pdf",
            "title": "Norderneyer Morgen - 05.03.2024",
            "date": "05.03.2024",
        }

    def test_latest_not_found_is_not_an_http_error(self, client):
        override_resolver(EditionNotFound(reason="Keine aktuelle Zeitung gefunden"))

        response = client.get("/api/editions/latest")

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "error": "Keine aktuelle Zeitung gefunden",
            "code": "PDF_NOT_FOUND",
        }

    def test_default_resolver_uses_environment(self, client, monkeypatch):
        """Without an override the resolver checks the configured origin."""
        monkeypatch.setenv("NEWSPAPER_BASE_URL", "https://zeitung.example")
        with patch("newspaper_viewer.editions.prober.requests.head") as mock_head:
            mock_head.return_value = make_response(404)
            response = client.get("/api/editions/latest")

        assert response.json()["success"] is False
        assert mock_head.call_count == 8
        assert all(c.args[0].startswith("https://zeitung.example/") for c in mock_head.call_args_list)

    def test_malformed_setting_reported_as_not_found(self, client, monkeypatch):
        monkeypatch.setenv("NEWSPAPER_LOOKBACK_DAYS", "sieben")
        with patch("newspaper_viewer.editions.prober.requests.head") as mock_head:
            response = client.get("/api/editions/latest")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "PARSING_ERROR"
        assert body["error"]
        mock_head.assert_not_called()


class TestProxyEndpoint:
    """Tests for GET /api/pdf-proxy."""

    @patch("newspaper_viewer.proxy.requests.get")
    def test_streams_pdf(self, mock_get, client):
        mock_get.return_value = make_response(
            200,
            headers={"Content-Type": "application/pdf", "Content-Length": "8"},
            chunks=[b"%PDF", b"-1.4"],
        )

        response = client.get("/api/pdf-proxy", params={"url": PDF_URL})

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4"
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == "inline"

    @patch("newspaper_viewer.proxy.requests.get")
    def test_gzip_upstream_body_complete(self, mock_get, client):
        mock_get.return_value = make_response(
            200,
            headers={"Content-Type": "application/pdf", "Content-Encoding": "gzip", "Content-Length": "5"},
            chunks=[b"%PDF", b"-1.4"],
        )

        response = client.get("/api/pdf-proxy", params={"url": PDF_URL})

        assert response.status_code == 200
        assert response.content == b"%PDF-1.4"
        assert response.headers.get("content-length") != "5"

    def test_foreign_host_rejected(self, client):
        response = client.get("/api/pdf-proxy", params={"url": "https://evil.example/x.pdf"})
        assert response.status_code == 400

    def test_missing_url(self, client):
        response = client.get("/api/pdf-proxy")
        assert response.status_code == 422

    @patch("newspaper_viewer.proxy.requests.get")
    def test_upstream_missing(self, mock_get, client):
        mock_get.return_value = make_response(404)

        response = client.get("/api/pdf-proxy", params={"url": PDF_URL})

        assert response.status_code == 404


class TestViewerEndpoints:
    """Tests for GET /api/viewer/info and /api/viewer/page."""

    def test_info(self, client, sample_pdf_bytes):
        override_proxy_bytes(sample_pdf_bytes)

        response = client.get("/api/viewer/info", params={"url": PDF_URL})

        assert response.status_code == 200
        assert response.json() == {"pageCount": 3, "hasNavigation": True}

    def test_info_single_page(self, client, single_page_pdf_bytes):
        override_proxy_bytes(single_page_pdf_bytes)

        response = client.get("/api/viewer/info", params={"url": PDF_URL})

        assert response.json() == {"pageCount": 1, "hasNavigation": False}

    def test_render_page(self, client, sample_pdf_bytes):
        override_proxy_bytes(sample_pdf_bytes)

        response = client.get("/api/viewer/page", params={"url": PDF_URL, "page": 2, "width": 500})

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        width, _ = png_size(response.content)
        assert abs(width - 500) <= 1

    def test_page_out_of_range(self, client, sample_pdf_bytes):
        override_proxy_bytes(sample_pdf_bytes)

        response = client.get("/api/viewer/page", params={"url": PDF_URL, "page": 9})

        assert response.status_code == 404

    def test_invalid_page_parameter(self, client, sample_pdf_bytes):
        override_proxy_bytes(sample_pdf_bytes)

        response = client.get("/api/viewer/page", params={"url": PDF_URL, "page": 0})

        assert response.status_code == 422

    def test_upstream_failure(self, client):
        override_proxy_bytes(error=ProxyError("Upstream request failed", EditionErrorCode.NETWORK_ERROR, 502))

        response = client.get("/api/viewer/info", params={"url": PDF_URL})

        assert response.status_code == 502
        assert response.json()["detail"] == "Upstream request failed"

    def test_not_a_pdf(self, client):
        override_proxy_bytes(b"<html>Fehler</html>")

        response = client.get("/api/viewer/info", params={"url": PDF_URL})

        assert response.status_code == 422


class TestAppEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root_redirects_to_viewer(self, client):
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/static/index.html"

    def test_viewer_page_served(self, client):
        response = client.get("/static/index.html")
        assert response.status_code == 200
        assert "Zeitung wird geladen" in response.text

    def test_viewer_page_links_proxied_pdf(self, client):
        text = client.get("/static/index.html").text
        assert "latest.proxyUrl" in text
        assert "'resize'" not in text
