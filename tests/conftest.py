"""Shared pytest fixtures for ytnorm tests."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import pytest

from ytnorm.models import ValidationResult

T = TypeVar("T")

VIDEO_ID = "dQw4w9WgXcQ"
CANONICAL = f"https://www.youtube.com/watch?v={VIDEO_ID}"

# --- URL Fixtures ---

# One sample per supported shape, all embedding VIDEO_ID
SHAPE_SAMPLES: dict[str, str] = {
    "standard": f"https://www.youtube.com/watch?v={VIDEO_ID}",
    "standard_no_www": f"https://youtube.com/watch?v={VIDEO_ID}",
    "standard_no_scheme": f"www.youtube.com/watch?v={VIDEO_ID}",
    "mobile": f"https://m.youtube.com/watch?v={VIDEO_ID}",
    "mobile_no_scheme": f"m.youtube.com/watch?v={VIDEO_ID}",
    "short": f"https://youtu.be/{VIDEO_ID}",
    "short_no_scheme": f"youtu.be/{VIDEO_ID}",
    "embed": f"https://www.youtube.com/embed/{VIDEO_ID}",
    "shorts": f"https://www.youtube.com/shorts/{VIDEO_ID}",
    "bare_id": VIDEO_ID,
}


@pytest.fixture
def valid_url() -> str:
    """A standard watch URL that validates."""
    return CANONICAL


@pytest.fixture
def recorder() -> list[Any]:
    """List that collects callback arguments."""
    return []


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine on a fresh event loop."""
    return asyncio.run(coro)


def video_id_of(result: ValidationResult) -> str:
    """Video ID of a successful result."""
    assert result.normalized_url is not None, result.error
    return result.normalized_url.video_id
