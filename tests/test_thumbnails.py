"""Tests for the Vimeo oEmbed thumbnail lookup."""

import http.client
import logging
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from videotoken.thumbnails import (
    build_oembed_url,
    fetch_vimeo_thumbnail_url,
    fetch_vimeo_thumbnail_url_async,
)

URLOPEN = "videotoken.thumbnails.urllib.request.urlopen"
THUMB = "https://i.vimeocdn.com/video/452001751-d_640"


def _mock_response(body: bytes, status: int = 200) -> MagicMock:
    mock_resp = MagicMock()
    mock_resp.status = status
    mock_resp.read.return_value = body
    mock_resp.__enter__ = MagicMock(return_value=mock_resp)
    mock_resp.__exit__ = MagicMock(return_value=False)
    return mock_resp


class TestBuildOembedUrl:
    def test_default_endpoint(self):
        assert build_oembed_url("76979871") == (
            "https://vimeo.com/api/oembed.json?url=https%3A%2F%2Fvimeo.com%2F76979871"
        )

    def test_custom_endpoint(self):
        assert build_oembed_url("1", endpoint="http://localhost:8080/oembed") == (
            "http://localhost:8080/oembed?url=https%3A%2F%2Fvimeo.com%2F1"
        )

    def test_configured_endpoint(self, monkeypatch):
        monkeypatch.setenv("VIDEOTOKEN_OEMBED_ENDPOINT", "http://mirror.test/oembed.json")
        assert build_oembed_url("1").startswith("http://mirror.test/oembed.json?url=")

    def test_token_is_encoded_once(self):
        assert build_oembed_url("my clip") == (
            "https://vimeo.com/api/oembed.json?url=https%3A%2F%2Fvimeo.com%2Fmy+clip"
        )


class TestFetchVimeoThumbnailUrl:
    def test_returns_thumbnail(self):
        body = f'{{"type": "video", "thumbnail_url": "{THUMB}"}}'.encode()
        with patch(URLOPEN, return_value=_mock_response(body)) as mock_open:
            assert fetch_vimeo_thumbnail_url("76979871") == THUMB
        req = mock_open.call_args[0][0]
        assert req.get_method() == "GET"
        assert req.get_header("User-agent").startswith("videotoken/")

    def test_no_timeout_by_default(self):
        body = f'{{"thumbnail_url": "{THUMB}"}}'.encode()
        with patch(URLOPEN, return_value=_mock_response(body)) as mock_open:
            fetch_vimeo_thumbnail_url("76979871")
        assert mock_open.call_args.kwargs == {}

    def test_explicit_timeout(self):
        body = f'{{"thumbnail_url": "{THUMB}"}}'.encode()
        with patch(URLOPEN, return_value=_mock_response(body)) as mock_open:
            fetch_vimeo_thumbnail_url("76979871", timeout=2.5)
        assert mock_open.call_args.kwargs == {"timeout": 2.5}

    def test_configured_timeout(self, monkeypatch):
        monkeypatch.setenv("VIDEOTOKEN_THUMBNAIL_TIMEOUT", "5")
        body = f'{{"thumbnail_url": "{THUMB}"}}'.encode()
        with patch(URLOPEN, return_value=_mock_response(body)) as mock_open:
            fetch_vimeo_thumbnail_url("76979871")
        assert mock_open.call_args.kwargs == {"timeout": 5.0}

    def test_non_200_status(self):
        with patch(URLOPEN, return_value=_mock_response(b"", status=204)):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_http_error(self):
        error = urllib.error.HTTPError(
            "https://vimeo.com/api/oembed.json", 404, "Not Found", None, None
        )
        with patch(URLOPEN, side_effect=error):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_connection_error(self):
        with patch(URLOPEN, side_effect=urllib.error.URLError("Connection refused")):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_timeout_error(self):
        with patch(URLOPEN, side_effect=TimeoutError("timed out")):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_bad_status_line(self):
        with patch(URLOPEN, side_effect=http.client.BadStatusLine("NOT-HTTP garbage")):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_invalid_url(self):
        with patch(URLOPEN, side_effect=http.client.InvalidURL("bad port")):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_truncated_body(self):
        mock_resp = _mock_response(b"")
        mock_resp.read.side_effect = http.client.IncompleteRead(b'{"thumb')
        with patch(URLOPEN, return_value=mock_resp):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_malformed_endpoint(self):
        """Request rejects URLs without a scheme before anything is sent."""
        with patch(URLOPEN) as mock_open:
            assert fetch_vimeo_thumbnail_url("76979871", endpoint="not a url") is None
        mock_open.assert_not_called()

    @pytest.mark.parametrize(
        "body",
        [
            b"<html>not json</html>",
            b"",
            b"\xff\xfe\x00garbage",
            b"[]",
            b'"thumbnail_url"',
            b'{"title": "no thumbnail here"}',
            b'{"thumbnail_url": null}',
            b'{"thumbnail_url": 42}',
            b'{"thumbnail_url": ""}',
        ],
    )
    def test_unusable_payload(self, body):
        with patch(URLOPEN, return_value=_mock_response(body)):
            assert fetch_vimeo_thumbnail_url("76979871") is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="videotoken.thumbnails"):
            with patch(URLOPEN, side_effect=urllib.error.URLError("boom")):
                fetch_vimeo_thumbnail_url("76979871")
        assert "Vimeo oEmbed lookup for '76979871' failed" in caplog.text

    def test_missing_field_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="videotoken.thumbnails"):
            with patch(URLOPEN, return_value=_mock_response(b"{}")):
                fetch_vimeo_thumbnail_url("76979871")
        assert "has no thumbnail_url" in caplog.text


class TestFetchVimeoThumbnailUrlAsync:
    @pytest.mark.asyncio
    async def test_returns_thumbnail(self):
        body = f'{{"thumbnail_url": "{THUMB}"}}'.encode()
        with patch(URLOPEN, return_value=_mock_response(body)):
            assert await fetch_vimeo_thumbnail_url_async("76979871") == THUMB

    @pytest.mark.asyncio
    async def test_failure_returns_none(self):
        with patch(URLOPEN, side_effect=OSError("unreachable")):
            assert await fetch_vimeo_thumbnail_url_async("76979871") is None


@pytest.mark.integration
class TestLiveOembed:
    """Calls the real Vimeo API. Run with --run-integration."""

    def test_known_video_has_thumbnail(self):
        thumbnail = fetch_vimeo_thumbnail_url("76979871", timeout=15)
        assert thumbnail is not None
        assert thumbnail.startswith("https://")
