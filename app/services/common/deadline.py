"""Caller-supplied time budget for chained store queries."""

import time

from app.errors import DeadlineExceededError


class Deadline:
    """Expires `seconds` after creation; None never expires."""

    def __init__(self, seconds: float | None = None):
        self._expires_at = None if seconds is None else time.monotonic() + seconds

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def check(self, step: str) -> None:
        """Raise before starting `step` if the budget is spent."""
        if self.expired:
            raise DeadlineExceededError(f"Deadline exceeded before {step}")
