"""
Token and URL parsing.

Pipeline: normalize -> classify -> extract (YouTube) -> resolve/validate.
"""

from videotoken.parsing.classifier import Classification, classify, is_url
from videotoken.parsing.normalize import normalize_input
from videotoken.parsing.resolver import guess_provider_by_token, resolve_token
from videotoken.parsing.utils import extract_token, get_provider_for_input
from videotoken.parsing.youtube import (
    YOUTUBE_RULES,
    YouTubeRule,
    find_youtube_rule,
    parse_youtube_token_by_url,
)

__all__ = [
    "normalize_input",
    "Classification",
    "classify",
    "is_url",
    "YOUTUBE_RULES",
    "YouTubeRule",
    "find_youtube_rule",
    "parse_youtube_token_by_url",
    "guess_provider_by_token",
    "resolve_token",
    "extract_token",
    "get_provider_for_input",
]
