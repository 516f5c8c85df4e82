"""Diagnostic message representation for conformance checks."""

from __future__ import annotations

from dataclasses import dataclass

from conformlib.diagnostics.severity import DiagnosticSeverity
from conformlib.diagnostics.site import ViolationSite


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message."""

    severity: DiagnosticSeverity
    message: str
    site: ViolationSite | None = None
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        where = f"{self.site}: " if self.site else ""
        return f"{where}{self.severity}: {self.message}"
