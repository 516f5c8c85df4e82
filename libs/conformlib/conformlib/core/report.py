"""Aggregated result of auditing a candidate against several contracts."""

from __future__ import annotations

from dataclasses import dataclass

from conformlib.core.candidate import ViolationKind
from conformlib.core.errors import ConformanceError
from conformlib.diagnostics import Diagnostic, ViolationSite


@dataclass(frozen=True)
class Violation:
    """One required operation a candidate failed to provide."""

    contract: str
    operation: str
    reason: ViolationKind
    message: str

    @property
    def site(self) -> ViolationSite:
        return ViolationSite(self.contract, self.operation)

    def to_error(self, candidate: str) -> ConformanceError:
        return ConformanceError(
            self.message, self.contract, self.operation, candidate, self.reason
        )


@dataclass(frozen=True)
class ConformanceReport:
    """Every violation found by :func:`conformlib.core.checker.audit`.

    ``violations`` keep the scan order used by ``ensure_implements``, so the
    first violation here is the one the fail-fast check raises.
    """

    candidate: str
    contracts: tuple[str, ...]
    violations: tuple[Violation, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def conforms(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.conforms

    def first_violation(self) -> Violation | None:
        return self.violations[0] if self.violations else None

    def missing(self, contract: str) -> tuple[str, ...]:
        """Operation names of *contract* the candidate failed to provide."""
        return tuple(v.operation for v in self.violations if v.contract == contract)

    def format(self) -> str:
        """Human-readable summary, one diagnostic per line."""
        if not self.diagnostics:
            return f"{self.candidate} conforms to {', '.join(self.contracts)}"
        return "\n".join(str(d) for d in self.diagnostics)

    def raise_for_violations(self) -> None:
        """Raise the ``ConformanceError`` for the first violation, if any."""
        first = self.first_violation()
        if first is not None:
            raise first.to_error(self.candidate)
