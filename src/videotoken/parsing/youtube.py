"""
YouTube token extraction from the path part of a YouTube URL.

The extractor is an ordered cascade of rules evaluated first-match-wins.
Later rules are more permissive than earlier ones, so the order is part of
the behavior:

1. User channel with URI prefix (no token)
2. Exact match
3. URI prefix + token
4. Token + organic URL parameters
5. Multi-account user channel (no token)
6. URL encoded like the API does it
7. Special cases (playlist)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# The one and only shape of a YouTube video token
YOUTUBE_TOKEN_PATTERN = r"[a-zA-Z0-9_-]{11}"

_TOKEN = rf"(?P<token>{YOUTUBE_TOKEN_PATTERN})"


@dataclass(frozen=True)
class YouTubeRule:
    """One step of the extraction cascade.

    Attributes:
        name: Short identifier, used in logs and diagnostics
        pattern: Compiled pattern, applied with ``search``
        yields_token: False for rules that recognize a URL carrying no video
            (channels); a match on such a rule stops the cascade with None
    """

    name: str
    pattern: re.Pattern[str]
    yields_token: bool = True

    def apply(self, fragment: str) -> tuple[bool, str | None]:
        """Return (matched, token) for this rule."""
        match = self.pattern.search(fragment)
        if match is None:
            return False, None
        if not self.yields_token:
            return True, None
        return True, match.group("token")


YOUTUBE_RULES: tuple[YouTubeRule, ...] = (
    YouTubeRule("user_channel", re.compile(r"^user/"), yields_token=False),
    YouTubeRule("exact", re.compile(rf"^{_TOKEN}\Z")),
    YouTubeRule(
        "prefix",
        re.compile(
            r"^(?:watch\?v=|v/|embed/|ytscreeningroom\?v=|\?v=|\?vi=|e/"
            r"|watch\?.*vi?=|\?feature=[a-z_]*&v=|vi/)"
            + _TOKEN
        ),
    ),
    YouTubeRule("organic_params", re.compile(rf"^{_TOKEN}(?:\?[a-z]|&[a-z])")),
    YouTubeRule(
        "multi_account_channel",
        re.compile(rf"u/1/{YOUTUBE_TOKEN_PATTERN}(?:\?rel=0)?$"),
        yields_token=False,
    ),
    YouTubeRule(
        "url_encoded",
        re.compile(rf"(?:watch%3Fv%3D|watch\?v%3D){_TOKEN}[%&]"),
    ),
    YouTubeRule("playlist", re.compile(rf"^watchv={_TOKEN}&list=")),
)


def find_youtube_rule(fragment: str) -> YouTubeRule | None:
    """Find the first rule of the cascade that matches a URL fragment.

    Args:
        fragment: URL remainder after the host (path and query)

    Returns:
        The matching rule, or None if no rule matches
    """
    for rule in YOUTUBE_RULES:
        matched, _ = rule.apply(fragment)
        if matched:
            return rule
    return None


def parse_youtube_token_by_url(fragment: str) -> str | None:
    """Find a YouTube token in the part of a URL that follows the host.

    Args:
        fragment: URL remainder after the host, e.g. ``watch?v=dQw4w9WgXcQ``

    Returns:
        The 11-character token, or None when the fragment holds no video
        (channel URLs) or matches no known format
    """
    for rule in YOUTUBE_RULES:
        matched, token = rule.apply(fragment)
        if matched:
            logger.debug(f"YouTube fragment {fragment!r} matched rule {rule.name}")
            return token
    return None
