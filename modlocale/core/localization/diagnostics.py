"""Structured diagnostics for contained localization failures.

Every failure the engine absorbs (fallbacks, lifecycle errors, format
mismatches) is logged and also kept here as a Diagnostic, so callers and
tests can see what happened without scraping logs.
"""

import logging
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

from modlocale.core.logging_utils import setup_logger

logger = setup_logger("modlocale.diagnostics")


@dataclass(frozen=True)
class Diagnostic:
    """One contained failure or degraded outcome."""

    severity: int
    operation: str
    message: str
    exception: BaseException | None = None
    timestamp: float = field(default_factory=time.time)
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def severity_name(self) -> str:
        return logging.getLevelName(self.severity)


@dataclass(frozen=True)
class LifecycleResult:
    """Outcome of initialize() or cleanup()."""

    ok: bool
    operation: str
    diagnostics: tuple[Diagnostic, ...] = ()

    def __bool__(self) -> bool:
        return self.ok

    @property
    def error(self) -> BaseException | None:
        """First exception recorded during the operation, if any."""
        for diagnostic in self.diagnostics:
            if diagnostic.exception is not None:
                return diagnostic.exception
        return None


class DiagnosticLog:
    """Bounded record of recent diagnostics, mirrored to the logger."""

    def __init__(self, capacity: int = 100, log: logging.Logger | None = None):
        """Initialize diagnostic log.

        Args:
            capacity: Maximum records kept (oldest dropped first)
            log: Logger to mirror records to
        """
        self._records: deque[Diagnostic] = deque(maxlen=capacity)
        self._total = 0
        self._logger = log or logger

    def record(
        self,
        severity: int,
        operation: str,
        message: str,
        exception: BaseException | None = None,
        **details,
    ) -> Diagnostic:
        """Record and log a diagnostic.

        Args:
            severity: logging level (e.g., logging.WARNING)
            operation: Operation name ('apply', 'initialize', 'format', ...)
            message: Human-readable description
            exception: Exception that caused it, if any
            **details: Extra fields kept on the record

        Returns:
            The recorded Diagnostic
        """
        diagnostic = Diagnostic(
            severity=severity,
            operation=operation,
            message=message,
            exception=exception,
            details=details,
        )
        self._records.append(diagnostic)
        self._total += 1

        # Tracebacks only for real failures
        exc_info = exception if exception is not None and severity >= logging.ERROR else None
        self._logger.log(severity, message, exc_info=exc_info)
        return diagnostic

    def records(self, operation: str | None = None, min_severity: int = logging.NOTSET) -> list[Diagnostic]:
        """Get recorded diagnostics, oldest first.

        Args:
            operation: Only records for this operation
            min_severity: Only records at or above this level

        Returns:
            List of Diagnostic
        """
        return [
            d
            for d in self._records
            if d.severity >= min_severity and (operation is None or d.operation == operation)
        ]

    def mark(self) -> int:
        """Current position, for use with since()."""
        return self._total

    def since(self, marker: int) -> tuple[Diagnostic, ...]:
        """Get diagnostics recorded after a marker from mark().

        Records already evicted by the capacity bound are not returned.
        """
        added = self._total - marker
        if added <= 0:
            return ()
        return tuple(list(self._records)[-added:])

    def counts(self) -> dict[str, int]:
        """Count records per severity name."""
        return dict(Counter(d.severity_name for d in self._records))

    def clear(self):
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
