"""Tests for ytnorm.models."""

import pytest

from ytnorm.models import (
    DEFAULT_MESSAGES,
    EXAMPLE_URL,
    ErrorKind,
    NormalizedURL,
    URLMetadata,
    URLValidationError,
    ValidationResult,
)

from .conftest import CANONICAL, VIDEO_ID


class TestErrorKind:
    """Tests for the error taxonomy."""

    def test_closed_set(self) -> None:
        """Exactly the seven documented kinds exist."""
        assert {k.value for k in ErrorKind} == {
            "INVALID_FORMAT",
            "NOT_YOUTUBE",
            "MISSING_VIDEO_ID",
            "PRIVATE_VIDEO",
            "VIDEO_NOT_FOUND",
            "NETWORK_ERROR",
            "DUPLICATE_VIDEO",
        }

    def test_every_kind_has_default_message(self) -> None:
        """Default table covers every kind."""
        assert set(DEFAULT_MESSAGES) == set(ErrorKind)


class TestURLValidationError:
    """Tests for URLValidationError."""

    def test_default_message(self) -> None:
        """Message falls back to the defaults table."""
        error = URLValidationError(ErrorKind.NOT_YOUTUBE)
        assert error.message == DEFAULT_MESSAGES[ErrorKind.NOT_YOUTUBE][0]
        assert str(error) == error.message
        assert error.suggestion is None

    def test_with_defaults_fills_missing(self) -> None:
        """with_defaults adds suggestion and example."""
        error = URLValidationError(ErrorKind.MISSING_VIDEO_ID).with_defaults()
        assert error.suggestion
        assert error.example == EXAMPLE_URL

    def test_with_defaults_keeps_explicit(self) -> None:
        """Explicit suggestion/example win over defaults."""
        error = URLValidationError(
            ErrorKind.NOT_YOUTUBE, "custom", suggestion="do this", example="that"
        ).with_defaults()
        assert (error.message, error.suggestion, error.example) == ("custom", "do this", "that")

    def test_to_dict_omits_absent(self) -> None:
        """to_dict leaves out unset optional fields."""
        error = URLValidationError(ErrorKind.PRIVATE_VIDEO, "private")
        assert error.to_dict() == {"kind": "PRIVATE_VIDEO", "message": "private"}


class TestNormalizedURL:
    """Tests for NormalizedURL."""

    def test_from_video_id(self) -> None:
        """Builds the canonical URL from the ID."""
        url = NormalizedURL.from_video_id("raw", VIDEO_ID)
        assert url.canonical == CANONICAL
        assert url.is_valid is True

    def test_rejects_mismatched_canonical(self) -> None:
        """Canonical must be the watch URL of video_id."""
        with pytest.raises(ValueError):
            NormalizedURL(original="x", canonical="https://youtu.be/" + VIDEO_ID, video_id=VIDEO_ID)

    def test_to_dict_with_metadata(self) -> None:
        """Metadata is serialized without absent keys."""
        url = NormalizedURL.from_video_id("raw", VIDEO_ID, URLMetadata(timestamp=30))
        assert url.to_dict() == {
            "original": "raw",
            "canonical": CANONICAL,
            "video_id": VIDEO_ID,
            "metadata": {"timestamp": 30},
        }


class TestURLMetadata:
    """Tests for URLMetadata."""

    def test_is_empty(self) -> None:
        """Empty only when every field is absent."""
        assert URLMetadata().is_empty()
        assert not URLMetadata(index=0).is_empty()

    def test_zero_timestamp_is_kept(self) -> None:
        """0 is a real value, not absence."""
        assert URLMetadata(timestamp=0).to_dict() == {"timestamp": 0}


class TestValidationResult:
    """Tests for the result union."""

    def test_ok(self) -> None:
        """ok() sets only normalized_url."""
        result = ValidationResult.ok(NormalizedURL.from_video_id("raw", VIDEO_ID))
        assert result.is_valid
        assert result.error is None
        assert result.to_dict()["is_valid"] is True

    def test_fail(self) -> None:
        """fail() sets only error."""
        result = ValidationResult.fail(URLValidationError(ErrorKind.NOT_YOUTUBE))
        assert not result.is_valid
        assert result.normalized_url is None
        assert result.to_dict()["error"]["kind"] == "NOT_YOUTUBE"

    def test_rejects_both(self) -> None:
        """Both branches populated is invalid."""
        with pytest.raises(ValueError):
            ValidationResult(
                normalized_url=NormalizedURL.from_video_id("raw", VIDEO_ID),
                error=URLValidationError(ErrorKind.NOT_YOUTUBE),
            )

    def test_to_dict_without_branch_raises(self) -> None:
        """A result forged past __post_init__ fails loudly instead of serializing."""
        forged = object.__new__(ValidationResult)
        object.__setattr__(forged, "normalized_url", None)
        object.__setattr__(forged, "error", None)
        with pytest.raises(ValueError, match="neither"):
            forged.to_dict()

    def test_rejects_neither(self) -> None:
        """Neither branch populated is invalid."""
        with pytest.raises(ValueError):
            ValidationResult()
