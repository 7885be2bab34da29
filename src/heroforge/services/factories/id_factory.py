"""Sequential hero identifiers owned by one factory."""
from __future__ import annotations

import threading


class HeroIdSequence:
    """Thread-safe monotonically increasing ``{prefix}_{n}`` identifiers."""

    def __init__(self, prefix: str = "hero", start: int = 0) -> None:
        self._prefix = prefix
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            ordinal = self._next
            self._next += 1
        return make_instance_id(self._prefix, ordinal)


def make_instance_id(prefix: str, ordinal: int) -> str:
    return f"{prefix}_{ordinal}"
