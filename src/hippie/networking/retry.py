"""Bounded retry with exponential backoff and jitter.

The executor knows nothing about HTTP: it calls an operation, absorbs
transient failures up to a limit, and re-raises everything else as-is.

Delays grow as ``base * 2**attempt`` plus up to ``jitter`` seconds of
random noise::

    attempt 0 -> ~0.1s
    attempt 1 -> ~0.2s
    attempt 2 -> ~0.4s
    attempt 3 -> ~0.8s
"""

from __future__ import annotations

import logging
import random
from time import sleep
from typing import Callable, TypeVar

from .errors import is_transient

T = TypeVar("T")

DEFAULT_BASE_DELAY_SECONDS = 0.1
DEFAULT_JITTER_SECONDS = 0.05


class RetryExecutor:
    """Run operations with retry on transient errors."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        base_delay_seconds: float = DEFAULT_BASE_DELAY_SECONDS,
        jitter_seconds: float = DEFAULT_JITTER_SECONDS,
        is_retryable: Callable[[BaseException], bool] = is_transient,
    ) -> None:
        if base_delay_seconds < 0:
            raise ValueError("base_delay_seconds must be >= 0")
        if jitter_seconds < 0:
            raise ValueError("jitter_seconds must be >= 0")
        self.logger = logger
        self._base_delay = base_delay_seconds
        self._jitter = jitter_seconds
        self._is_retryable = is_retryable

    def backoff_delay(self, attempt: int) -> float:
        """Return the sleep before the attempt after ``attempt``.

        The result lies in ``[base * 2**attempt, base * 2**attempt + jitter)``.
        """
        return (2**attempt) * self._base_delay + random.random() * self._jitter

    def run(self, operation: Callable[[], T], max_retries: int | None = 3) -> T:
        """Call ``operation`` up to ``max_retries + 1`` times.

        Args:
            operation: Zero-argument callable to invoke.
            max_retries: Retries after the first attempt. ``None`` and
                negative values mean a single attempt.

        Returns:
            The first successful result of ``operation``.

        Raises:
            Exception: The original error, when it is not transient or
                when the last attempt fails.
        """
        retries = max(0, max_retries or 0)
        attempt = 0
        while True:
            try:
                return operation()
            except Exception as exc:
                if attempt >= retries or not self._is_retryable(exc):
                    raise
                delay = self.backoff_delay(attempt)
                if self.logger is not None:
                    self.logger.warning(
                        "`%s` %d/%d Delay: %.3fs", exc, attempt + 1, retries, delay
                    )
                sleep(delay)
                attempt += 1
