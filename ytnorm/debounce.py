"""Debounced validation on top of the asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from ytnorm.logging import logger
from ytnorm.models import ValidationResult
from ytnorm.validator import validate_quick

ResultCallback = Callable[[ValidationResult], None]

DEFAULT_DELAY = 0.3  # seconds


class DebouncedValidator:
    """Coalesces bursts of validation requests into one delayed validation.

    Each instance owns a single pending-timer slot. A new schedule() replaces
    whatever was pending, so only the last request in a burst produces a
    callback. Must be used from the thread running the event loop; with no
    loop available schedule() behaves like run_immediate().

    Usage:
        validator = DebouncedValidator(delay=0.3)
        validator.schedule(text, on_result)  # on every keystroke
        validator.run_immediate(text, on_result)  # on paste
        validator.dispose()  # on teardown
    """

    def __init__(self, delay: float = DEFAULT_DELAY, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize validator.

        Args:
            delay: Seconds to wait after the last schedule() call
            loop: Event loop for timers (default: the running loop at schedule time)
        """
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._disposed = False

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a scheduled validation has not fired yet."""
        return self._handle is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def schedule(self, raw: str | None, callback: ResultCallback) -> None:
        """Validate raw after the delay unless superseded by another call.

        Without a usable event loop there is nothing to arm a timer on, so the
        validation runs immediately instead.
        """
        if self._disposed:
            logger.debug("Ignoring schedule() on disposed validator")
            return
        loop = self._resolve_loop()
        if loop is None:
            logger.debug("No running event loop, validating immediately")
            self.run_immediate(raw, callback)
            return
        self.cancel()
        self._handle = loop.call_later(self._delay, self._fire, raw, callback)
        logger.debug("Validation armed in {:.0f}ms", self._delay * 1000)

    def run_immediate(self, raw: str | None, callback: ResultCallback) -> None:
        """Cancel anything pending and validate right now."""
        if self._disposed:
            logger.debug("Ignoring run_immediate() on disposed validator")
            return
        self.cancel()
        _invoke(callback, validate_quick(raw))

    def cancel(self) -> None:
        """Drop the pending validation, if any, without calling back."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Pending validation cancelled")

    def dispose(self) -> None:
        """Cancel pending work and ignore all further requests."""
        self.cancel()
        self._disposed = True

    def _resolve_loop(self) -> asyncio.AbstractEventLoop | None:
        """Loop to arm timers on: the given one if still open, else the running one."""
        if self._loop is not None:
            return None if self._loop.is_closed() else self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _fire(self, raw: str | None, callback: ResultCallback) -> None:
        self._handle = None
        if self._disposed:
            return
        _invoke(callback, validate_quick(raw))


def _invoke(callback: ResultCallback, result: ValidationResult) -> None:
    # Timer callbacks run inside the event loop; keep listener bugs out of it
    try:
        callback(result)
    except Exception as e:
        logger.warning("Validation callback failed: {}", e)
