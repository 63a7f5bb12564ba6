"""
Configuration constants for videotoken.

Contains provider definitions, URL templates, and default settings.
"""

from videotoken.config.defaults import MAX_TOKEN_LENGTH, THUMBNAIL_TIMEOUT
from videotoken.config.loader import (
    ConfigSource,
    VideoTokenConfig,
    clear_config_cache,
    get_config,
)
from videotoken.config.providers import (
    YOUTUBE_DOMAINS,
    VideoProvider,
    list_supported_providers,
)

__all__ = [
    "MAX_TOKEN_LENGTH",
    "THUMBNAIL_TIMEOUT",
    "VideoProvider",
    "YOUTUBE_DOMAINS",
    "list_supported_providers",
    # Config loader
    "ConfigSource",
    "VideoTokenConfig",
    "get_config",
    "clear_config_cache",
]
