"""Diagnostic severity levels for conformance reports."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """Severity level of a diagnostic message."""

    # A required operation is absent or not callable.
    ERROR = "error"
    # Suspicious but harmless, e.g. the same contract passed twice.
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value
