"""
Provider resolution and final validation of a parsed token.

Combines the URL classification with the caller's provider hint and the
shape of the token itself. The token shape has the last word: an 8-digit
token is Vimeo and an 11-character token is YouTube, even if the hint or
the URL said otherwise. Consumers rely on this, so do not "fix" it.
"""

from __future__ import annotations

import logging
import re

from videotoken.config.defaults import MAX_TOKEN_LENGTH
from videotoken.config.providers import VideoProvider
from videotoken.exceptions import (
    InvalidFormatError,
    ProviderRequiredError,
    TokenTooLongError,
)
from videotoken.parsing.classifier import classify
from videotoken.parsing.normalize import normalize_input
from videotoken.parsing.youtube import YOUTUBE_TOKEN_PATTERN

logger = logging.getLogger(__name__)

_NUMERIC_TOKEN = re.compile(r"[0-9]+")
_YOUTUBE_TOKEN = re.compile(YOUTUBE_TOKEN_PATTERN)


def guess_provider_by_token(token: str | None) -> VideoProvider | None:
    """Infer the provider from the token shape alone.

    Args:
        token: Candidate token

    Returns:
        VIMEO for all-digit tokens, YOUTUBE for 11-character tokens of
        [a-zA-Z0-9_-], None otherwise
    """
    if token is None:
        return None
    if _NUMERIC_TOKEN.fullmatch(token):
        return VideoProvider.VIMEO
    if _YOUTUBE_TOKEN.fullmatch(token):
        return VideoProvider.YOUTUBE
    return None


def resolve_token(
    value: str, provider: str | VideoProvider | None = None
) -> tuple[str, VideoProvider]:
    """Parse a token or URL into a validated (token, provider) pair.

    Args:
        value: Raw token, URL or HTML embed snippet
        provider: Optional provider hint ("youtube", "vimeo", any case)

    Returns:
        Tuple of (token, provider)

    Raises:
        InvalidFormatError: URL is unrecognized, or a recognized URL holds no
            video token (channel URLs included)
        ProviderRequiredError: No provider from URL, hint or token shape;
            an unknown hint counts as no hint
        TokenTooLongError: Token exceeds MAX_TOKEN_LENGTH characters
    """
    value, hint = normalize_input(value, provider)
    classification = classify(value)

    # Channel URLs and unreadable paths end up here alike
    if classification.provider is not None and classification.token is None:
        raise InvalidFormatError(
            f'Token can not be parsed for "{classification.provider.value}" provider.',
            value=value,
            provider=classification.provider.value,
        )

    token = classification.token if classification.token is not None else value

    resolved = classification.provider
    unknown_hint = None
    if resolved is None and hint is not None:
        resolved = VideoProvider.from_value(hint)
        if resolved is None:
            unknown_hint = hint

    guess = guess_provider_by_token(token)
    if guess is not None and guess is not resolved:
        previous = resolved.value if resolved is not None else unknown_hint
        if previous is not None:
            logger.debug(
                f"Token {token!r} looks like {guess.value}, overriding {previous!r}"
            )
        resolved = guess
        unknown_hint = None

    if resolved is None:
        details = {"hint": unknown_hint} if unknown_hint is not None else None
        raise ProviderRequiredError(
            f'Provider for token "{token}" is mandatory.', value=token, details=details
        )

    if len(token) > MAX_TOKEN_LENGTH:
        raise TokenTooLongError(
            f'Video token "{value}" is too long.',
            value=token,
            max_length=MAX_TOKEN_LENGTH,
        )

    return token, resolved
