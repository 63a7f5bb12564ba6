"""
Configuration loader with environment overrides.

Settings (highest to lowest priority):
1. Environment variables
   - VIDEOTOKEN_OEMBED_ENDPOINT: Vimeo oEmbed endpoint URL
   - VIDEOTOKEN_THUMBNAIL_TIMEOUT: timeout in seconds for thumbnail lookups
2. Defaults (config/defaults.py, config/providers.py)

There is no configuration file; videotoken is a library and leaves
anything more elaborate to the application embedding it.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from videotoken.config.defaults import THUMBNAIL_TIMEOUT
from videotoken.config.providers import VIMEO_OEMBED_ENDPOINT

logger = logging.getLogger(__name__)

ENV_OEMBED_ENDPOINT = "VIDEOTOKEN_OEMBED_ENDPOINT"
ENV_THUMBNAIL_TIMEOUT = "VIDEOTOKEN_THUMBNAIL_TIMEOUT"


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    DEFAULT = "default"


@dataclass(frozen=True)
class VideoTokenConfig:
    """Resolved videotoken configuration."""

    oembed_endpoint: str
    thumbnail_timeout: float | None
    source: ConfigSource

    def __repr__(self) -> str:
        return (
            f"VideoTokenConfig(oembed_endpoint={self.oembed_endpoint!r}, "
            f"thumbnail_timeout={self.thumbnail_timeout!r}, "
            f"source={self.source.value!r})"
        )


def _parse_timeout(raw: str) -> float | None:
    """Parse a timeout from the environment.

    Args:
        raw: Raw environment value.

    Returns:
        Positive timeout in seconds, or None if the value is unusable.
    """
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {ENV_THUMBNAIL_TIMEOUT}={raw!r}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive {ENV_THUMBNAIL_TIMEOUT}={raw!r}")
        return None
    return timeout


def _resolve_config() -> VideoTokenConfig:
    """Resolve configuration from the environment and defaults.

    Returns:
        Resolved VideoTokenConfig. Source is ENV if any variable was applied.
    """
    source = ConfigSource.DEFAULT

    endpoint = VIMEO_OEMBED_ENDPOINT
    env_endpoint = os.environ.get(ENV_OEMBED_ENDPOINT, "").strip()
    if env_endpoint:
        endpoint = env_endpoint
        source = ConfigSource.ENV
        logger.info(f"Using oEmbed endpoint from {ENV_OEMBED_ENDPOINT}: {endpoint}")

    timeout = THUMBNAIL_TIMEOUT
    env_timeout = os.environ.get(ENV_THUMBNAIL_TIMEOUT, "").strip()
    if env_timeout:
        parsed = _parse_timeout(env_timeout)
        if parsed is not None:
            timeout = parsed
            source = ConfigSource.ENV

    return VideoTokenConfig(
        oembed_endpoint=endpoint, thumbnail_timeout=timeout, source=source
    )


@lru_cache(maxsize=1)
def get_config() -> VideoTokenConfig:
    """Get resolved videotoken configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables have changed and you need to
    re-resolve the configuration.
    """
    get_config.cache_clear()
