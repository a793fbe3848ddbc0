"""Execution context supplied by the host for every vault operation."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .errors import InvalidInput


@dataclass(frozen=True)
class Context:
    """Authenticated caller identity and the current logical time."""

    caller: str
    now: int

    def __post_init__(self) -> None:
        if not isinstance(self.caller, str) or not self.caller.strip():
            raise InvalidInput("Context caller must be a non-empty principal.", field="caller")
        if isinstance(self.now, bool) or not isinstance(self.now, int) or self.now < 0:
            raise InvalidInput("Context time must be a non-negative integer.", field="now")


class LogicalClock:
    """Monotonic counter standing in for block height on a local host."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._value = start
        self._lock = threading.Lock()

    @property
    def now(self) -> int:
        return self._value

    def advance(self, steps: int = 1) -> int:
        if steps < 1:
            raise ValueError("steps must be >= 1")
        with self._lock:
            self._value += steps
            return self._value

    def context_for(self, caller: str) -> Context:
        return Context(caller=caller, now=self._value)


__all__ = ["Context", "LogicalClock"]
