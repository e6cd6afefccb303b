"""Data models for ytnorm."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

CANONICAL_PREFIX = "https://www.youtube.com/watch?v="
EXAMPLE_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


class ErrorKind(str, Enum):
    """Closed set of URL validation failure kinds."""

    INVALID_FORMAT = "INVALID_FORMAT"
    NOT_YOUTUBE = "NOT_YOUTUBE"
    MISSING_VIDEO_ID = "MISSING_VIDEO_ID"
    # Reserved for collaborators that check the video actually exists
    PRIVATE_VIDEO = "PRIVATE_VIDEO"
    VIDEO_NOT_FOUND = "VIDEO_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    DUPLICATE_VIDEO = "DUPLICATE_VIDEO"


# kind -> (message, suggestion, example)
DEFAULT_MESSAGES: dict[ErrorKind, tuple[str, str, str | None]] = {
    ErrorKind.INVALID_FORMAT: (
        "URL is empty",
        "Enter a YouTube video URL",
        EXAMPLE_URL,
    ),
    ErrorKind.NOT_YOUTUBE: (
        "Only YouTube URLs can be registered",
        "Enter a youtube.com or youtu.be URL",
        EXAMPLE_URL,
    ),
    ErrorKind.MISSING_VIDEO_ID: (
        "No video ID found in URL",
        "Enter the full URL of a YouTube video page",
        EXAMPLE_URL,
    ),
    ErrorKind.PRIVATE_VIDEO: (
        "This video is private",
        "Ask the owner to make it public or unlisted",
        None,
    ),
    ErrorKind.VIDEO_NOT_FOUND: (
        "Video not found",
        "Check that the video has not been deleted",
        EXAMPLE_URL,
    ),
    ErrorKind.NETWORK_ERROR: (
        "Network error while checking the video",
        "Check your connection and try again",
        None,
    ),
    ErrorKind.DUPLICATE_VIDEO: (
        "This video is already registered",
        "Pick a different video or open the existing entry",
        None,
    ),
}


class URLValidationError(ValueError):
    """Raised when a URL cannot be normalized to a YouTube video."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        suggestion: str | None = None,
        example: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind][0]
        self.suggestion = suggestion
        self.example = example
        super().__init__(self.message)

    def with_defaults(self) -> URLValidationError:
        """Return a copy with suggestion/example filled in from the defaults table."""
        _, suggestion, example = DEFAULT_MESSAGES[self.kind]
        return URLValidationError(
            self.kind,
            self.message,
            suggestion=self.suggestion if self.suggestion is not None else suggestion,
            example=self.example if self.example is not None else example,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/YAML output."""
        d: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.suggestion is not None:
            d["suggestion"] = self.suggestion
        if self.example is not None:
            d["example"] = self.example
        return d

    def __repr__(self) -> str:
        return f"URLValidationError({self.kind.name}, {self.message!r})"


@dataclass(frozen=True)
class URLMetadata:
    """Best-effort metadata pulled from the query string."""

    timestamp: int | None = None  # seconds
    playlist: str | None = None
    index: int | None = None

    def is_empty(self) -> bool:
        return self.timestamp is None and self.playlist is None and self.index is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting absent fields."""
        d: dict[str, Any] = {}
        if self.timestamp is not None:
            d["timestamp"] = self.timestamp
        if self.playlist is not None:
            d["playlist"] = self.playlist
        if self.index is not None:
            d["index"] = self.index
        return d


@dataclass(frozen=True)
class NormalizedURL:
    """A successfully normalized YouTube video URL."""

    original: str
    canonical: str
    video_id: str
    metadata: URLMetadata | None = None

    def __post_init__(self) -> None:
        if self.canonical != CANONICAL_PREFIX + self.video_id:
            raise ValueError(f"Canonical URL does not match video ID: {self.canonical}")

    @property
    def is_valid(self) -> bool:
        return True

    @classmethod
    def from_video_id(
        cls, original: str, video_id: str, metadata: URLMetadata | None = None
    ) -> NormalizedURL:
        """Build the canonical watch URL for a video ID."""
        return cls(
            original=original,
            canonical=CANONICAL_PREFIX + video_id,
            video_id=video_id,
            metadata=metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/YAML output."""
        d: dict[str, Any] = {
            "original": self.original,
            "canonical": self.canonical,
            "video_id": self.video_id,
        }
        if self.metadata is not None:
            d["metadata"] = self.metadata.to_dict()
        return d


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: exactly one of normalized_url or error is set."""

    normalized_url: NormalizedURL | None = None
    error: URLValidationError | None = None

    def __post_init__(self) -> None:
        if (self.normalized_url is None) == (self.error is None):
            raise ValueError("ValidationResult needs exactly one of normalized_url or error")

    @classmethod
    def ok(cls, normalized_url: NormalizedURL) -> ValidationResult:
        return cls(normalized_url=normalized_url)

    @classmethod
    def fail(cls, error: URLValidationError) -> ValidationResult:
        return cls(error=error)

    @property
    def is_valid(self) -> bool:
        return self.normalized_url is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/YAML output."""
        if self.normalized_url is not None:
            return {"is_valid": True, "normalized_url": self.normalized_url.to_dict()}
        if self.error is not None:
            return {"is_valid": False, "error": self.error.to_dict()}
        raise ValueError("ValidationResult holds neither a URL nor an error")


class InputState(str, Enum):
    """Live classification of text that may still be mid-entry."""

    EMPTY = "empty"
    TYPING = "typing"
    VALID = "valid"
    INVALID = "invalid"
