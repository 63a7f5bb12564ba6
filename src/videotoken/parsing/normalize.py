"""
Input normalization: trim the token-or-URL, lowercase the provider hint.
"""

from __future__ import annotations

from videotoken.config.providers import VideoProvider


def normalize_input(
    value: str, provider: str | VideoProvider | None = None
) -> tuple[str, str | None]:
    """Normalize raw user input before parsing.

    No validation happens here.

    Args:
        value: Raw token or URL
        provider: Optional provider hint, as a string or VideoProvider

    Returns:
        Tuple of (stripped value, lowercased hint or None)
    """
    if isinstance(provider, VideoProvider):
        hint: str | None = provider.value
    elif provider:
        hint = provider.strip().lower() or None
    else:
        hint = None
    return value.strip(), hint
