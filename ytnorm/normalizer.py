"""YouTube URL normalization.

Turns any recognized spelling of a YouTube video URL into the canonical
``https://www.youtube.com/watch?v=<id>`` form and pulls out best-effort
metadata (start time, playlist, playlist index).
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

from ytnorm.logging import logger
from ytnorm.models import ErrorKind, NormalizedURL, URLMetadata, URLValidationError
from ytnorm.patterns import VIDEO_ID_RE, YOUTUBE_URL_PATTERNS

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_YOUTUBE_HOST_RE = re.compile(r"youtube\.com|youtu\.be", re.IGNORECASE)
# Anchored at the start; whatever does not fit the grammar is dropped
_TIME_RE = re.compile(r"^(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s?)?")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def is_valid_video_id(value: str) -> bool:
    """Check that value is exactly 11 characters of [A-Za-z0-9_-]."""
    return VIDEO_ID_RE.fullmatch(value) is not None


def is_youtube_url(url: str) -> bool:
    """Loose host check: does the text mention youtube.com or youtu.be anywhere."""
    return _YOUTUBE_HOST_RE.search(url) is not None


def add_protocol_if_missing(url: str) -> str:
    if _SCHEME_RE.match(url):
        return url
    return f"https://{url}"


def parse_time_parameter(value: str) -> int:
    """Convert a ``t`` parameter to seconds.

    Accepts ``90``, ``90s``, ``1m30s``, ``1h2m3s`` and so on. Parsing stops at
    the first character that does not fit, so ``"1h-30m"`` is one hour and
    ``"30.5"`` is 30 seconds. Text with no leading number yields 0.
    """
    match = _TIME_RE.match(value.strip())
    if match is None:
        return 0
    hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def extract_metadata(url: str) -> URLMetadata | None:
    """Pull ``t``, ``list`` and ``index`` from the query string.

    Never raises; malformed values are skipped. Returns None if nothing was found.
    """
    try:
        query = parse_qs(urlsplit(url).query)
    except ValueError as e:
        logger.debug("Skipping metadata for {}: {}", url, e)
        return None

    timestamp = None
    if query.get("t"):
        timestamp = parse_time_parameter(query["t"][0])

    playlist = query["list"][0] if query.get("list") else None

    index = None
    if query.get("index"):
        index_match = _LEADING_INT_RE.match(query["index"][0].strip())
        if index_match:
            index = int(index_match.group())

    metadata = URLMetadata(timestamp=timestamp, playlist=playlist, index=index)
    return None if metadata.is_empty() else metadata


def normalize(raw: str | None) -> NormalizedURL:
    """Normalize a YouTube URL or bare video ID.

    Args:
        raw: User input. None means "no value"; an empty or whitespace-only
            string means "value present but blank". Both are INVALID_FORMAT.

    Returns:
        NormalizedURL with canonical watch URL and optional metadata

    Raises:
        URLValidationError: INVALID_FORMAT, NOT_YOUTUBE or MISSING_VIDEO_ID
    """
    if raw is None:
        raise URLValidationError(ErrorKind.INVALID_FORMAT, "No URL provided")
    if not isinstance(raw, str):
        raise URLValidationError(ErrorKind.INVALID_FORMAT, "URL must be a string")

    trimmed = raw.strip()
    if not trimmed:
        raise URLValidationError(ErrorKind.INVALID_FORMAT, "URL is empty")

    if is_valid_video_id(trimmed):
        return NormalizedURL.from_video_id(raw, trimmed)

    url = add_protocol_if_missing(trimmed)

    for pattern in YOUTUBE_URL_PATTERNS:
        video_id = pattern.extract(url)
        if video_id and is_valid_video_id(video_id):
            logger.debug("Matched '{}' for {}", pattern.description, trimmed)
            return NormalizedURL.from_video_id(raw, video_id, extract_metadata(url))

    if not is_youtube_url(url):
        raise URLValidationError(ErrorKind.NOT_YOUTUBE)
    # Channel, playlist, search and bare /watch pages all land here
    raise URLValidationError(ErrorKind.MISSING_VIDEO_ID)


def normalize_multiple(urls: list[str]) -> list[NormalizedURL | None]:
    """Normalize several URLs, with None in place of each failure."""
    results: list[NormalizedURL | None] = []
    for url in urls:
        try:
            results.append(normalize(url))
        except URLValidationError as e:
            logger.debug("Could not normalize {}: {}", url, e.kind.name)
            results.append(None)
    return results
