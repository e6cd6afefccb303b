"""Non-throwing validation and live input classification."""

from __future__ import annotations

import re

from ytnorm.models import InputState, URLValidationError, ValidationResult
from ytnorm.normalizer import is_youtube_url, normalize

_PARTIAL_VIDEO_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,10}")
_PARTIAL_SCHEME_RE = re.compile(r"^h(?:t(?:t(?:p(?:s?(?::(?:/(?:/)?)?)?)?)?)?)?$", re.IGNORECASE)
_SCHEME_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)
_YOUTUBE_HOSTS = ("youtube.com", "www.youtube.com", "m.youtube.com", "youtu.be")

HINT_VIDEO_PAGE = "Enter a video page URL (e.g. https://www.youtube.com/watch?v=...)"
HINT_INCOMPLETE = "The URL may be incomplete. Enter the full URL"
HINT_NOT_YOUTUBE = "Only YouTube URLs can be registered"


def validate_quick(raw: str | None) -> ValidationResult:
    """Validate without raising.

    Errors come back in the result with a suggestion and example filled in.
    """
    try:
        return ValidationResult.ok(normalize(raw))
    except URLValidationError as e:
        return ValidationResult.fail(e.with_defaults())


def _looks_like_youtube_host(text: str) -> bool:
    """True if text names a YouTube host, or could still become one as typing continues."""
    lowered = text.lower()
    if "youtube" in lowered or "youtu.be" in lowered:
        return True
    if _PARTIAL_SCHEME_RE.match(lowered):
        return True
    host = _SCHEME_PREFIX_RE.sub("", lowered)
    host = re.split(r"[/?#]", host, maxsplit=1)[0]
    return bool(host) and any(candidate.startswith(host) for candidate in _YOUTUBE_HOSTS)


def classify(raw: str | None) -> InputState:
    """Classify possibly-incomplete input for live feedback.

    Leans towards TYPING rather than INVALID so the UI does not flash an error
    while the user is still composing a YouTube URL.
    """
    if raw is None:
        return InputState.EMPTY
    if not isinstance(raw, str):
        return InputState.INVALID
    if not raw.strip():
        return InputState.EMPTY

    if validate_quick(raw).is_valid:
        return InputState.VALID

    text = raw.strip()
    if _looks_like_youtube_host(text):
        return InputState.TYPING

    lowered = text.lower()
    starts_like_url = lowered.startswith(("http", "www"))
    if starts_like_url and not is_youtube_url(text):
        return InputState.INVALID
    if starts_like_url:
        return InputState.TYPING

    if _PARTIAL_VIDEO_ID_RE.fullmatch(text):
        return InputState.TYPING

    return InputState.INVALID


get_input_state = classify


def get_url_hint(raw: str | None) -> str | None:
    """Return a contextual hint for common input mistakes, or None."""
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip()
    lowered = text.lower()

    if "youtube" in lowered and "watch?v=" not in lowered and "youtu.be/" not in lowered:
        return HINT_VIDEO_PAGE

    if "youtu" in lowered and len(text) < 20:
        return HINT_INCOMPLETE

    if "youtube" not in lowered and "youtu.be" not in lowered:
        if "http" in lowered or "www" in lowered:
            return HINT_NOT_YOUTUBE

    return None
