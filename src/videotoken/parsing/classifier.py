"""
URL classification: decide whether input is a URL, which provider family
it belongs to, and hand the path to the matching token extractor.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from videotoken.config.providers import YOUTUBE_DOMAINS, VideoProvider
from videotoken.exceptions import InvalidFormatError
from videotoken.parsing.youtube import (
    YOUTUBE_TOKEN_PATTERN,
    parse_youtube_token_by_url,
)

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"^(?:https?://|//)(?:www\.)?(.+)$")

_YOUTUBE_HOST_PATTERN = re.compile(
    r"^(?:" + "|".join(re.escape(d) for d in YOUTUBE_DOMAINS) + r")/(.+)$"
)

# Vimeo tokens are matched directly; host and path prefix are optional
_VIMEO_PATTERN = re.compile(
    r"(?:(?:player\.)?vimeo\.com/(?:video/)?)?(?P<token>[0-9]{8})"
)

# Inline HTML snippet, e.g. <iframe src="https://www.youtube.com/embed/TOKEN">
_YOUTUBE_EMBED_SNIPPET = re.compile(rf'embed/(?P<token>{YOUTUBE_TOKEN_PATTERN})"')


@dataclass(frozen=True)
class Classification:
    """Result of classifying normalized input.

    Attributes:
        provider: Provisional provider, None if the input is not a URL
        token: Extracted token candidate, None if nothing was extracted
    """

    provider: VideoProvider | None = None
    token: str | None = None


def is_url(value: str) -> bool:
    """Check whether input is URL-shaped (http, https or protocol-relative)."""
    return _URL_PATTERN.match(value) is not None


def classify(value: str) -> Classification:
    """Classify normalized input and extract a token candidate.

    Args:
        value: Stripped token, URL or HTML embed snippet

    Returns:
        Classification with provisional provider and token candidate

    Raises:
        InvalidFormatError: If the input is a URL from an unrecognized host
    """
    result = Classification()

    url_match = _URL_PATTERN.match(value)
    if url_match:
        remainder = url_match.group(1)
        youtube_match = _YOUTUBE_HOST_PATTERN.match(remainder)
        if youtube_match:
            result = Classification(
                provider=VideoProvider.YOUTUBE,
                token=parse_youtube_token_by_url(youtube_match.group(1)),
            )
        else:
            vimeo_match = _VIMEO_PATTERN.search(remainder)
            if vimeo_match is None:
                raise InvalidFormatError(
                    f'Token or URL "{value}" is invalid.', value=value
                )
            result = Classification(
                provider=VideoProvider.VIMEO, token=vimeo_match.group("token")
            )

    # An embed snippet wins over whatever the URL said
    snippet_match = _YOUTUBE_EMBED_SNIPPET.search(value)
    if snippet_match:
        logger.debug(f"Found YouTube embed snippet in {value!r}")
        result = Classification(
            provider=VideoProvider.YOUTUBE, token=snippet_match.group("token")
        )

    return result
