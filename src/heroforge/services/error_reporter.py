"""Centralized failure reporting with logging and observer fan-out."""
from __future__ import annotations

import logging
import time
import traceback
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional

from heroforge.core.types import Severity

logger = logging.getLogger(__name__)

MAX_HISTORY = 500

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    message: str
    context: str
    severity: Severity
    timestamp: float
    stack: Optional[str] = None


ErrorObserver = Callable[[ErrorRecord], None]


class ErrorReporter:
    """Turn exceptions into ``ErrorRecord`` values, log them and notify observers."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._observers: List[ErrorObserver] = []
        self._history: Deque[ErrorRecord] = deque(maxlen=MAX_HISTORY)

    @property
    def records(self) -> list[ErrorRecord]:
        """Reported records, oldest first."""
        return list(self._history)

    def subscribe(self, observer: ErrorObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: ErrorObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def report(
        self,
        error: BaseException | str,
        context: str,
        severity: Severity = "error",
    ) -> ErrorRecord:
        if isinstance(error, BaseException):
            message = str(error)
            stack = _format_stack(error)
        else:
            message = str(error)
            stack = None
        record = ErrorRecord(
            message=message,
            context=context,
            severity=severity,
            timestamp=self._clock(),
            stack=stack,
        )
        self._history.append(record)

        level = _LOG_LEVELS.get(severity, logging.ERROR)
        if stack:
            logger.log(level, "[%s] %s\n%s", context, message, stack)
        else:
            logger.log(level, "[%s] %s", context, message)

        for observer in list(self._observers):
            try:
                observer(record)
            except Exception:
                logger.exception("Error observer %r failed for context %s", observer, context)
        return record


def _format_stack(error: BaseException) -> Optional[str]:
    if error.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))
