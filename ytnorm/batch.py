"""Chunked batch validation that yields to the event loop between chunks."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ytnorm.logging import logger
from ytnorm.models import ValidationResult
from ytnorm.validator import validate_quick

DEFAULT_BATCH_SIZE = 5
DEFAULT_BATCH_DELAY = 0.1  # seconds


@dataclass(frozen=True)
class BatchProgress:
    """Progress snapshot reported after each chunk."""

    done: int
    total: int

    @property
    def fraction(self) -> float:
        return self.done / self.total if self.total > 0 else 1.0


ProgressCallback = Callable[[BatchProgress], None]


class BatchValidator:
    """Validates many URLs in fixed-size chunks.

    Validation itself is synchronous; the pause between chunks keeps large
    inputs from starving other tasks on the loop. Not reentrant: one run()
    at a time per instance.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE, delay: float = DEFAULT_BATCH_DELAY) -> None:
        """Initialize batch validator.

        Args:
            batch_size: URLs validated per chunk (must be positive)
            delay: Seconds to pause between chunks (0 still yields once)
        """
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.batch_size = batch_size
        self.delay = delay
        self._cancelled = False
        self._running = False
        self.results: list[ValidationResult] = []

    @property
    def is_validating(self) -> bool:
        return self._running

    def cancel(self) -> None:
        """Stop after the current chunk; run() returns the results so far."""
        self._cancelled = True

    async def run(
        self, urls: Sequence[str], on_progress: ProgressCallback | None = None
    ) -> list[ValidationResult]:
        """Validate urls in order and return one result per processed URL."""
        self._cancelled = False
        self._running = True
        self.results = []
        total = len(urls)

        try:
            for start in range(0, total, self.batch_size):
                if self._cancelled:
                    logger.debug("Batch cancelled after {}/{} URLs", len(self.results), total)
                    break

                chunk = urls[start : start + self.batch_size]
                self.results.extend(validate_quick(url) for url in chunk)
                logger.debug("Validated chunk {}-{} of {}", start + 1, start + len(chunk), total)

                if on_progress is not None:
                    on_progress(BatchProgress(done=len(self.results), total=total))

                if start + self.batch_size < total:
                    await asyncio.sleep(self.delay)
        finally:
            self._running = False

        return list(self.results)


async def validate_batch(
    urls: Sequence[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
    delay: float = DEFAULT_BATCH_DELAY,
    on_progress: ProgressCallback | None = None,
) -> list[ValidationResult]:
    """Validate urls in chunks with a fresh BatchValidator."""
    return await BatchValidator(batch_size, delay).run(urls, on_progress)
