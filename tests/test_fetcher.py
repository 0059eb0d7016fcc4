"""Tests for helpgen.services.fetcher.fetch_sitemap."""

import httpx
import pytest

from helpgen.models.config import BuildConfig
from helpgen.services.fetcher import fetch_sitemap

_BODY = b'{"1": [{"type": "cat", "name": "Billing", "url": "billing"}]}'


def _config(tmp_path, **kwargs) -> BuildConfig:
    return BuildConfig(sitemap_path=tmp_path / "help" / "sitemap.json", **kwargs)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestFetchSitemap:
    def test_writes_body_and_returns_byte_count(self, tmp_path):
        config = _config(tmp_path)
        with _client(lambda request: httpx.Response(200, content=_BODY)) as client:
            written = fetch_sitemap(config, client)
        assert written == len(_BODY)
        assert config.sitemap_path.read_bytes() == _BODY

    def test_requests_the_sitemap_url(self, tmp_path):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, content=b"{}")

        with _client(handler) as client:
            fetch_sitemap(_config(tmp_path), client)
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == "https://support.toggl.com/sitemap/"

    def test_replaces_previous_cache_file(self, tmp_path):
        config = _config(tmp_path)
        config.sitemap_path.parent.mkdir(parents=True)
        config.sitemap_path.write_bytes(b"stale content that is longer than the new body")
        with _client(lambda request: httpx.Response(200, content=b"{}")) as client:
            fetch_sitemap(config, client)
        assert config.sitemap_path.read_bytes() == b"{}"

    def test_logs_byte_count(self, tmp_path, caplog):
        caplog.set_level("INFO", logger="helpgen.services.fetcher")
        with _client(lambda request: httpx.Response(200, content=_BODY)) as client:
            fetch_sitemap(_config(tmp_path), client)
        assert f"{len(_BODY)} bytes downloaded." in caplog.text


class TestFetchSitemapErrors:
    def test_transport_error_propagates_without_touching_cache(self, tmp_path):
        config = _config(tmp_path)
        config.sitemap_path.parent.mkdir(parents=True)
        config.sitemap_path.write_bytes(b"previous")

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                fetch_sitemap(config, client)
        assert config.sitemap_path.read_bytes() == b"previous"

    def test_http_error_status_raises_by_default(self, tmp_path):
        config = _config(tmp_path)
        with _client(lambda request: httpx.Response(503, content=b"down")) as client:
            with pytest.raises(httpx.HTTPStatusError):
                fetch_sitemap(config, client)
        assert not config.sitemap_path.exists()

    def test_error_body_is_cached_when_status_check_disabled(self, tmp_path):
        config = _config(tmp_path, raise_for_status=False)
        with _client(lambda request: httpx.Response(404, content=b"<h1>Not Found</h1>")) as client:
            fetch_sitemap(config, client)
        assert config.sitemap_path.read_bytes() == b"<h1>Not Found</h1>"
