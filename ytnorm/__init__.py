"""ytnorm - YouTube URL normalization and live validation."""

from ytnorm.debounce import DebouncedValidator
from ytnorm.models import (
    ErrorKind,
    InputState,
    NormalizedURL,
    URLMetadata,
    URLValidationError,
    ValidationResult,
)
from ytnorm.normalizer import is_valid_video_id, normalize
from ytnorm.state import URLValidationGroup, URLValidationState
from ytnorm.validator import classify, get_url_hint, validate_quick

try:
    from ytnorm._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    "DebouncedValidator",
    "ErrorKind",
    "InputState",
    "NormalizedURL",
    "URLMetadata",
    "URLValidationError",
    "URLValidationGroup",
    "URLValidationState",
    "ValidationResult",
    "classify",
    "get_url_hint",
    "is_valid_video_id",
    "normalize",
    "validate_quick",
    "__version__",
]
