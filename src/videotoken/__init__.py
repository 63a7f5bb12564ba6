"""
videotoken - Normalize YouTube and Vimeo references into embeddable tokens.

Accepts raw video ids, URLs in their many real-world shapes and HTML embed
snippets, and turns them into an immutable (token, provider) value:

    >>> video = VideoToken.parse("https://youtu.be/dQw4w9WgXcQ?t=42")
    >>> video.token, video.provider.value
    ('dQw4w9WgXcQ', 'youtube')
    >>> video.embed_url
    'https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0'
"""

# Config
from videotoken.config.defaults import MAX_TOKEN_LENGTH
from videotoken.config.providers import VideoProvider, list_supported_providers

# Exceptions
from videotoken.exceptions import (
    InvalidFormatError,
    ProviderRequiredError,
    TokenTooLongError,
    UnsupportedProviderError,
    VideoTokenError,
)

# Models
from videotoken.models.video_token import VideoToken

# Parsing utilities
from videotoken.parsing.classifier import is_url
from videotoken.parsing.resolver import guess_provider_by_token
from videotoken.parsing.utils import extract_token, get_provider_for_input
from videotoken.parsing.youtube import parse_youtube_token_by_url

# Thumbnails
from videotoken.thumbnails import fetch_vimeo_thumbnail_url

__version__ = "1.0.0"

__all__ = [
    # Models
    "VideoToken",
    # Config
    "VideoProvider",
    "MAX_TOKEN_LENGTH",
    "list_supported_providers",
    # Parsing utilities
    "parse_youtube_token_by_url",
    "guess_provider_by_token",
    "extract_token",
    "get_provider_for_input",
    "is_url",
    "fetch_vimeo_thumbnail_url",
    # Exceptions
    "VideoTokenError",
    "InvalidFormatError",
    "TokenTooLongError",
    "ProviderRequiredError",
    "UnsupportedProviderError",
]
