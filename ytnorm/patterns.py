"""Ordered registry of recognized YouTube URL shapes.

Patterns are evaluated in order and the first match wins, so the bare
identifier fallback must stay last.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

VIDEO_ID_CHARS = r"[A-Za-z0-9_-]"
VIDEO_ID_LENGTH = 11
VIDEO_ID_RE = re.compile(rf"^{VIDEO_ID_CHARS}{{{VIDEO_ID_LENGTH}}}$")

_ID = rf"(?P<id>{VIDEO_ID_CHARS}{{{VIDEO_ID_LENGTH}}})"
_SCHEME = r"(?:https?://)?"
# The ID must end at a delimiter so 12+ character values never match
_ID_END_QUERY = r"(?=[&#]|$)"
_ID_END_PATH = r"(?=[?&#/]|$)"


@dataclass(frozen=True)
class URLPattern:
    """One recognized URL shape and how to pull a video ID out of it."""

    regex: re.Pattern[str]
    extractor: Callable[[re.Match[str]], str | None]
    description: str

    def matches(self, url: str) -> bool:
        return self.regex.search(url) is not None

    def extract(self, url: str) -> str | None:
        """Return the candidate video ID, or None if the shape does not match."""
        match = self.regex.search(url)
        if match is None:
            return None
        return self.extractor(match)


def _id_group(match: re.Match[str]) -> str | None:
    return match.group("id")


def _pattern(regex: str, description: str) -> URLPattern:
    return URLPattern(re.compile(regex, re.IGNORECASE), _id_group, description)


YOUTUBE_URL_PATTERNS: tuple[URLPattern, ...] = (
    _pattern(
        rf"^{_SCHEME}(?:www\.)?youtube\.com/watch/?\?(?:[^#]*&)?v={_ID}{_ID_END_QUERY}",
        "Standard watch URL",
    ),
    _pattern(
        rf"^{_SCHEME}m\.youtube\.com/watch/?\?(?:[^#]*&)?v={_ID}{_ID_END_QUERY}",
        "Mobile watch URL",
    ),
    _pattern(rf"^{_SCHEME}youtu\.be/{_ID}{_ID_END_PATH}", "Short link"),
    _pattern(rf"^{_SCHEME}(?:www\.)?youtube\.com/embed/{_ID}{_ID_END_PATH}", "Embed URL"),
    _pattern(rf"^{_SCHEME}(?:www\.|m\.)?youtube\.com/shorts/{_ID}{_ID_END_PATH}", "Shorts URL"),
    URLPattern(
        re.compile(rf"^{_ID}$"),
        _id_group,
        "Bare video ID",
    ),
)


def find_pattern(url: str) -> URLPattern | None:
    """Return the first registry pattern matching url, if any."""
    for pattern in YOUTUBE_URL_PATTERNS:
        if pattern.matches(url):
            return pattern
    return None
