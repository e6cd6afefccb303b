"""Tests for ytnorm package exports."""

import importlib
import sys
from unittest.mock import patch

import ytnorm


def test_version_is_a_string() -> None:
    """Package exposes a non-empty __version__."""
    assert isinstance(ytnorm.__version__, str)
    assert ytnorm.__version__


def test_version_without_generated_module() -> None:
    """A source checkout without _version.py reports the dev version."""
    with patch.dict(sys.modules):
        for name in [m for m in sys.modules if m == "ytnorm" or m.startswith("ytnorm.")]:
            del sys.modules[name]
        sys.modules["ytnorm._version"] = None  # type: ignore[assignment]

        fresh = importlib.import_module("ytnorm")

        assert fresh is not ytnorm
        assert fresh.__version__ == "0.0.0.dev0"

    assert sys.modules["ytnorm"] is ytnorm


def test_public_api_exported() -> None:
    """Package exports the normalization entry points."""
    from ytnorm import ErrorKind, InputState, URLValidationError, classify, normalize, validate_quick

    assert normalize("dQw4w9WgXcQ").video_id == "dQw4w9WgXcQ"
    assert classify("") == InputState.EMPTY
    assert not validate_quick("").is_valid
    assert issubclass(URLValidationError, ValueError)
    assert ErrorKind("NOT_YOUTUBE") is ErrorKind.NOT_YOUTUBE


def test_all_names_resolve() -> None:
    """Every name in __all__ is an attribute of the package."""
    for name in ytnorm.__all__:
        assert hasattr(ytnorm, name), name


def test_state_classes_exported() -> None:
    """Stateful helpers are importable from the package root."""
    from ytnorm import DebouncedValidator, URLValidationGroup, URLValidationState

    assert callable(DebouncedValidator)
    assert callable(URLValidationGroup)
    assert callable(URLValidationState)
