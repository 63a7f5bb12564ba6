"""
Convenience wrappers around the parser that never raise.
"""

from __future__ import annotations

from videotoken.config.providers import VideoProvider
from videotoken.exceptions import VideoTokenError
from videotoken.parsing.resolver import resolve_token


def extract_token(value: str, provider: str | VideoProvider | None = None) -> str | None:
    """Extract the video token from a token or URL.

    Args:
        value: Video URL, token or embed snippet
        provider: Optional provider hint

    Returns:
        Token, or None if the input cannot be parsed
    """
    try:
        token, _ = resolve_token(value, provider)
    except VideoTokenError:
        return None
    return token


def get_provider_for_input(
    value: str, provider: str | VideoProvider | None = None
) -> VideoProvider | None:
    """Get the provider for a token or URL, or None if it cannot be parsed.

    Args:
        value: Video URL, token or embed snippet
        provider: Optional provider hint

    Returns:
        Resolved provider or None
    """
    try:
        _, resolved = resolve_token(value, provider)
    except VideoTokenError:
        return None
    return resolved
