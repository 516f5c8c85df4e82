"""Diagnostic collector for accumulating messages during a conformance audit."""

from __future__ import annotations

from conformlib.diagnostics.diagnostic import Diagnostic
from conformlib.diagnostics.severity import DiagnosticSeverity
from conformlib.diagnostics.site import ViolationSite


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are reported."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(
        self,
        message: str,
        site: ViolationSite | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, site, notes))

    def warning(
        self,
        message: str,
        site: ViolationSite | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, message, site, notes))

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def get_warnings(self) -> list[Diagnostic]:
        """Return the warning diagnostics, in reporting order."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]
