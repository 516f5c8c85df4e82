"""Exception types raised by contract definition and conformance checks."""

from __future__ import annotations

from conformlib.core.candidate import ViolationKind


class ContractError(Exception):
    """Base class for every error raised by conformlib."""


class ContractDefinitionError(ContractError):
    """Raised when a contract is malformed at definition time."""

    def __init__(
        self,
        message: str,
        contract: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.contract = contract
        self.operation = operation


class UsageError(ContractError):
    """Raised when the checker itself is called incorrectly."""


class ConformanceError(ContractError):
    """Raised when a candidate does not satisfy a required contract."""

    def __init__(
        self,
        message: str,
        contract: str,
        operation: str,
        candidate: str,
        reason: ViolationKind = ViolationKind.ABSENT,
    ) -> None:
        super().__init__(message)
        self.contract = contract
        self.operation = operation
        self.candidate = candidate
        self.reason = reason
