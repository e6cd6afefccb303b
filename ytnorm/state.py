"""Observable validation state for URL input controls.

URLValidationState backs a single input field; URLValidationGroup backs a
form with several URL fields keyed by an arbitrary field id.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from ytnorm.debounce import DEFAULT_DELAY, DebouncedValidator
from ytnorm.logging import logger
from ytnorm.models import NormalizedURL, ValidationResult

StateListener = Callable[[ValidationResult | None, bool], None]
GroupListener = Callable[[dict[str, ValidationResult], bool], None]

L = TypeVar("L", bound=Callable[..., None])


class _Listeners(Generic[L]):
    """Ordered listener list with snapshot notification.

    Listeners added or removed while a notification is running only take
    effect from the next notification.
    """

    def __init__(self) -> None:
        self._items: list[tuple[object, L]] = []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, listener: L) -> Callable[[], None]:
        token = object()
        self._items.append((token, listener))

        def unsubscribe() -> None:
            # Idempotent; removes only this registration
            self._items = [item for item in self._items if item[0] is not token]

        return unsubscribe

    def notify(self, *args: object) -> None:
        for _, listener in tuple(self._items):
            try:
                listener(*args)
            except Exception as e:
                logger.warning("Validation listener failed: {}", e)

    def clear(self) -> None:
        self._items.clear()


class URLValidationState:
    """Current validation result plus an "is validating" flag, with observers.

    Every transition notifies all listeners synchronously, in subscription
    order, with ``(current_result, is_validating)``.
    """

    def __init__(self, delay: float = DEFAULT_DELAY, validator: DebouncedValidator | None = None) -> None:
        """Initialize state.

        Args:
            delay: Debounce delay in seconds (ignored when validator is given)
            validator: Controller to drive; one is created if omitted
        """
        self._validator = validator or DebouncedValidator(delay)
        self._current_result: ValidationResult | None = None
        self._is_validating = False
        self._listeners: _Listeners[StateListener] = _Listeners()
        self._disposed = False

    @property
    def current_result(self) -> ValidationResult | None:
        return self._current_result

    @property
    def is_validating(self) -> bool:
        return self._is_validating

    def get_current_result(self) -> ValidationResult | None:
        return self._current_result

    def get_is_validating(self) -> bool:
        return self._is_validating

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register listener; returns a function that unregisters it."""
        return self._listeners.add(listener)

    def validate(self, raw: str | None) -> None:
        """Debounced validation, for keystrokes."""
        if self._disposed:
            return
        self._start()
        self._validator.schedule(raw, self._finish)

    def validate_immediate(self, raw: str | None) -> None:
        """Validation without delay, for paste events."""
        if self._disposed:
            return
        self._start()
        self._validator.run_immediate(raw, self._finish)

    def clear(self) -> None:
        """Cancel pending work and reset to the initial state."""
        self._validator.cancel()
        self._current_result = None
        self._is_validating = False
        self._notify()

    def dispose(self) -> None:
        """Tear down: cancel timers and drop listeners. Later calls are no-ops."""
        self._validator.dispose()
        self._listeners.clear()
        self._disposed = True

    def _start(self) -> None:
        self._is_validating = True
        self._notify()

    def _finish(self, result: ValidationResult) -> None:
        if self._disposed:
            return
        self._current_result = result
        self._is_validating = False
        self._notify()

    def _notify(self) -> None:
        if self._disposed:
            return
        self._listeners.notify(self._current_result, self._is_validating)


class URLValidationGroup:
    """Validation state for several URL fields, one debounce slot per field."""

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        self._delay = delay
        self._validators: dict[str, DebouncedValidator] = {}
        self._results: dict[str, ValidationResult] = {}
        self._pending: set[str] = set()
        self._listeners: _Listeners[GroupListener] = _Listeners()

    @property
    def results(self) -> dict[str, ValidationResult]:
        """Copy of the latest result per field."""
        return dict(self._results)

    @property
    def is_validating(self) -> bool:
        return bool(self._pending)

    def subscribe(self, listener: GroupListener) -> Callable[[], None]:
        """Register listener for ``(results, is_validating)``; returns unsubscribe."""
        return self._listeners.add(listener)

    def validate(self, key: str, raw: str | None) -> None:
        self._pending.add(key)
        self._notify()
        self._get_validator(key).schedule(raw, lambda result: self._finish(key, result))

    def validate_immediate(self, key: str, raw: str | None) -> None:
        self._pending.add(key)
        self._notify()
        self._get_validator(key).run_immediate(raw, lambda result: self._finish(key, result))

    def remove(self, key: str) -> None:
        """Forget a field, cancelling its pending validation."""
        validator = self._validators.pop(key, None)
        if validator is not None:
            validator.dispose()
        self._results.pop(key, None)
        self._pending.discard(key)
        self._notify()

    def clear(self) -> None:
        for validator in self._validators.values():
            validator.dispose()
        self._validators.clear()
        self._results.clear()
        self._pending.clear()
        self._notify()

    def get_valid_urls(self) -> list[tuple[str, NormalizedURL]]:
        """Return (key, normalized URL) for every field that validated."""
        return [
            (key, result.normalized_url)
            for key, result in self._results.items()
            if result.normalized_url is not None
        ]

    def _get_validator(self, key: str) -> DebouncedValidator:
        if key not in self._validators:
            self._validators[key] = DebouncedValidator(self._delay)
        return self._validators[key]

    def _finish(self, key: str, result: ValidationResult) -> None:
        if key not in self._validators:
            return
        self._results[key] = result
        self._pending.discard(key)
        self._notify()

    def _notify(self) -> None:
        self._listeners.notify(self.results, self.is_validating)
