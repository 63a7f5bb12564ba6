"""
VideoToken Pydantic model: a validated, immutable (token, provider) pair.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field

from videotoken.config.defaults import MAX_TOKEN_LENGTH
from videotoken.config.providers import (
    EMBED_URL_TEMPLATES,
    YOUTUBE_THUMBNAIL_TEMPLATE,
    VideoProvider,
)
from videotoken.exceptions import UnsupportedProviderError, VideoTokenError
from videotoken.parsing.resolver import resolve_token
from videotoken.parsing.youtube import (
    parse_youtube_token_by_url as _parse_youtube_token_by_url,
)
from videotoken.thumbnails import (
    fetch_vimeo_thumbnail_url,
    fetch_vimeo_thumbnail_url_async,
)


class VideoToken(BaseModel):
    """Parsed and validated video token with its provider.

    Build instances with ``VideoToken.parse()``, which accepts raw tokens,
    URLs and HTML embed snippets. Instances are frozen and hashable, so they
    can be shared and cached freely. Derived URLs are computed on each call.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ..., max_length=MAX_TOKEN_LENGTH, description="Provider-specific video id"
    )
    provider: VideoProvider = Field(..., description="Video hosting platform")

    @classmethod
    def parse(
        cls, value: str, provider: str | VideoProvider | None = None
    ) -> VideoToken:
        """Parse a token, URL or embed snippet.

        Args:
            value: Raw token or URL, e.g. ``https://youtu.be/dQw4w9WgXcQ``
            provider: Optional provider hint. The token shape overrides it:
                all-digit tokens are Vimeo, 11-character tokens are YouTube.

        Returns:
            VideoToken with the resolved token and provider

        Raises:
            InvalidFormatError: If a URL is unrecognized or holds no token
            ProviderRequiredError: If no provider can be determined (an
                unknown hint counts as none)
            TokenTooLongError: If the token exceeds 32 characters
        """
        token, resolved = resolve_token(value, provider)
        return cls(token=token, provider=resolved)

    @classmethod
    def try_parse(
        cls, value: str, provider: str | VideoProvider | None = None
    ) -> VideoToken | None:
        """Try to parse input, returning None on failure instead of raising."""
        try:
            return cls.parse(value, provider)
        except VideoTokenError:
            return None

    @staticmethod
    def parse_youtube_token_by_url(fragment: str) -> str | None:
        """Find a YouTube token in the part of a URL that follows the host."""
        return _parse_youtube_token_by_url(fragment)

    @property
    def embed_url(self) -> str:
        """Canonical iframe source URL for playback."""
        template = EMBED_URL_TEMPLATES.get(self.provider)
        if template is None:
            raise UnsupportedProviderError(str(self.provider))
        return template.format(token=quote_plus(self.token))

    def thumbnail_url(self) -> str | None:
        """Get a preview image URL.

        YouTube thumbnails are formatted directly. Vimeo thumbnails are
        looked up over the network on every call; failures return None.
        """
        if self.provider == VideoProvider.YOUTUBE:
            return YOUTUBE_THUMBNAIL_TEMPLATE.format(token=quote_plus(self.token))
        if self.provider == VideoProvider.VIMEO:
            return fetch_vimeo_thumbnail_url(self.token)
        return None

    async def thumbnail_url_async(self) -> str | None:
        """Async variant of thumbnail_url()."""
        if self.provider == VideoProvider.VIMEO:
            return await fetch_vimeo_thumbnail_url_async(self.token)
        return self.thumbnail_url()

    def to_dict(self) -> dict[str, Any]:
        """Plain dict view with the embed URL included."""
        return {
            "token": self.token,
            "provider": self.provider.value,
            "embed_url": self.embed_url,
        }

    def __str__(self) -> str:
        return f"{self.provider.value}:{self.token}"

    def __repr__(self) -> str:
        return f"VideoToken(token={self.token!r}, provider={self.provider.value!r})"
