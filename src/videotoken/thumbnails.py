"""
Thumbnail lookup for Vimeo videos via the public oEmbed API.

Lookups are best-effort: any failure is logged as a warning and reported
as None. There is no retry and no caching here; callers that need either
(or a bounded latency) wrap these calls themselves.

Example:
    >>> fetch_vimeo_thumbnail_url("76979871")
    'https://i.vimeocdn.com/video/...'
"""

from __future__ import annotations

import asyncio
import http.client
import json
import logging
import urllib.request
from typing import Any
from urllib.parse import urlencode

from videotoken.config.defaults import USER_AGENT
from videotoken.config.loader import get_config
from videotoken.config.providers import VIMEO_VIDEO_URL_TEMPLATE

logger = logging.getLogger(__name__)


def build_oembed_url(token: str, endpoint: str | None = None) -> str:
    """Build the oEmbed lookup URL for a Vimeo token.

    Args:
        token: Vimeo video token
        endpoint: oEmbed endpoint, defaults to the configured one

    Returns:
        Full lookup URL with the video URL as ``url`` query parameter
    """
    endpoint = endpoint or get_config().oembed_endpoint
    video_url = VIMEO_VIDEO_URL_TEMPLATE.format(token=token)
    return f"{endpoint}?{urlencode({'url': video_url})}"


def _read_thumbnail_url(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    thumbnail = payload.get("thumbnail_url")
    if not isinstance(thumbnail, str) or not thumbnail:
        return None
    return thumbnail


def fetch_vimeo_thumbnail_url(
    token: str,
    *,
    timeout: float | None = None,
    endpoint: str | None = None,
) -> str | None:
    """Look up the thumbnail URL of a Vimeo video.

    Args:
        token: Vimeo video token
        timeout: Socket timeout in seconds, defaults to the configured one
            (no timeout unless VIDEOTOKEN_THUMBNAIL_TIMEOUT is set)
        endpoint: oEmbed endpoint, defaults to the configured one

    Returns:
        Thumbnail URL, or None on transport errors, non-200 responses,
        malformed JSON or a missing ``thumbnail_url`` field
    """
    if timeout is None:
        timeout = get_config().thumbnail_timeout
    url = build_oembed_url(token, endpoint)
    kwargs: dict[str, Any] = {} if timeout is None else {"timeout": timeout}

    # Bad endpoints fail in Request (ValueError), broken peers in http.client
    try:
        req = urllib.request.Request(
            url,
            method="GET",
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )
        with urllib.request.urlopen(req, **kwargs) as resp:
            if resp.status != 200:
                logger.warning(
                    f"Vimeo oEmbed lookup for {token!r} returned HTTP {resp.status}"
                )
                return None
            body = resp.read()
    except (OSError, http.client.HTTPException, ValueError) as e:
        logger.warning(f"Vimeo oEmbed lookup for {token!r} failed: {e}")
        return None

    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.warning(f"Vimeo oEmbed response for {token!r} is not valid JSON: {e}")
        return None

    thumbnail = _read_thumbnail_url(payload)
    if thumbnail is None:
        logger.warning(f"Vimeo oEmbed response for {token!r} has no thumbnail_url")
    return thumbnail


async def fetch_vimeo_thumbnail_url_async(
    token: str,
    *,
    timeout: float | None = None,
    endpoint: str | None = None,
) -> str | None:
    """Async variant of fetch_vimeo_thumbnail_url, run in a worker thread."""
    return await asyncio.to_thread(
        fetch_vimeo_thumbnail_url, token, timeout=timeout, endpoint=endpoint
    )
