"""Violation site tracking for conformance diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViolationSite:
    """The contract (and optionally the operation) a diagnostic refers to."""

    contract: str
    operation: str | None = None

    def __str__(self) -> str:
        if self.operation is None:
            return self.contract
        return f"{self.contract}.{self.operation}"
