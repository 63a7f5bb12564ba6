"""
Video provider definitions.

Only YouTube and Vimeo are supported. Each provider carries the URL
templates used to build embed and thumbnail links for a parsed token.
"""

from enum import Enum


class VideoProvider(str, Enum):
    """Supported video hosting platforms."""

    YOUTUBE = "youtube"
    VIMEO = "vimeo"

    @classmethod
    def from_value(cls, value: str) -> "VideoProvider | None":
        """Look up a provider by its (lowercase) value, None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


# Hosts that carry a YouTube video path (after an optional "www.")
YOUTUBE_DOMAINS = [
    "youtube.com",
    "youtu.be",
    "youtube-nocookie.com",
    "yt.be",
]

# Embed (iframe src) templates, formatted with the quoted token
EMBED_URL_TEMPLATES: dict[VideoProvider, str] = {
    VideoProvider.VIMEO: "https://player.vimeo.com/video/{token}",
    VideoProvider.YOUTUBE: "https://www.youtube.com/embed/{token}?rel=0",
}

YOUTUBE_THUMBNAIL_TEMPLATE = "https://img.youtube.com/vi/{token}/maxresdefault.jpg"

VIMEO_OEMBED_ENDPOINT = "https://vimeo.com/api/oembed.json"
VIMEO_VIDEO_URL_TEMPLATE = "https://vimeo.com/{token}"


def list_supported_providers() -> list[str]:
    """List all supported provider names."""
    return [p.value for p in VideoProvider]
