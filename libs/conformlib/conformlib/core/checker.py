"""Conformance checks: verify that a candidate exposes every operation a contract requires.

Checks are stateless. Every call looks the members up again, so a candidate
mutated between two calls is judged on its current state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from conformlib.core.candidate import (
    ViolationKind,
    describe_candidate,
    inspect_member,
)
from conformlib.core.contract import Contract
from conformlib.core.errors import ConformanceError, UsageError
from conformlib.core.report import ConformanceReport, Violation
from conformlib.diagnostics import DiagnosticCollector, ViolationSite

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_contract_arguments(
    func_name: str, contracts: tuple[Any, ...], leading: int = 1
) -> None:
    """Raise UsageError unless *contracts* holds at least one Contract and nothing else.

    *leading* is the number of positional arguments *func_name* takes before
    its contracts; it only shapes the messages.
    """
    if not contracts:
        if leading:
            raise UsageError(
                f"{func_name} called with {leading} argument, but expected at least {leading + 1}"
            )
        raise UsageError(f"{func_name} expects at least one Contract")
    for index, contract in enumerate(contracts):
        if not isinstance(contract, Contract):
            raise UsageError(
                f"{func_name} expects contract arguments to be Contract instances, "
                f"argument {index + leading + 1} is {type(contract).__name__}"
            )


def _violation(
    value: Any, label: str, contract: Contract, op: str, kind: ViolationKind
) -> Violation:
    if kind is ViolationKind.ABSENT:
        detail = f"method '{op}' was not found"
    else:
        detail = f"method '{op}' is not callable ({type(value).__name__})"
    message = f"Object {label} does not implement the {contract.name} contract: {detail}"
    return Violation(contract.name, op, kind, message)


def _scan(candidate: Any, label: str, contracts: tuple[Contract, ...]) -> Iterator[Violation]:
    """Yield violations in contract order, then declared operation order."""
    seen: set[Contract] = set()
    for contract in contracts:
        if contract in seen:
            continue
        seen.add(contract)
        for op in contract.operations:
            kind, value = inspect_member(candidate, op)
            if kind is not None:
                yield _violation(value, label, contract, op, kind)


def ensure_implements(candidate: Any, *contracts: Contract, label: str | None = None) -> None:
    """
    Verify that *candidate* exposes a callable member for every required operation.

    Contracts are checked in the order given and operations in declared order;
    the first absent or non-callable member stops the check.

    Args:
        candidate: The object to check. It is only read, never modified.
        *contracts: One or more contracts the candidate must satisfy.
        label: Name used for the candidate in error messages.

    Raises:
        UsageError: If no contract is given, or an argument is not a Contract.
        ConformanceError: On the first missing or non-callable operation.
    """
    check_contract_arguments("ensure_implements", contracts)
    name = describe_candidate(candidate, label)
    for violation in _scan(candidate, name, contracts):
        raise violation.to_error(name)
    logger.debug("%s implements %s", name, ", ".join(c.name for c in contracts))


def conforms(candidate: Any, *contracts: Contract) -> bool:
    """Return True if *candidate* satisfies every contract. Usage errors still raise."""
    try:
        ensure_implements(candidate, *contracts)
    except ConformanceError:
        return False
    return True


def audit(candidate: Any, *contracts: Contract, label: str | None = None) -> ConformanceReport:
    """Check every contract and operation, collecting all violations instead of stopping."""
    check_contract_arguments("audit", contracts)
    name = describe_candidate(candidate, label)
    diag = DiagnosticCollector()

    seen: set[Contract] = set()
    for contract in contracts:
        if contract in seen:
            diag.warning(
                f"Contract {contract.name} was supplied more than once",
                ViolationSite(contract.name),
            )
        seen.add(contract)

    violations = tuple(_scan(candidate, name, contracts))
    for v in violations:
        diag.error(v.message, v.site, notes=(f"reason: {v.reason}",))

    logger.debug("Audited %s: %d violation(s)", name, len(violations))
    return ConformanceReport(
        candidate=name,
        contracts=tuple(c.name for c in contracts),
        violations=violations,
        diagnostics=tuple(diag.get_all()),
        warnings=tuple(diag.get_warnings()),
    )


def first_conforming(candidates: Iterable[T], *contracts: Contract) -> T:
    """Return the first candidate satisfying every contract.

    Used to probe several implementations and fall back to the next one.

    Raises:
        UsageError: If *candidates* is empty or a contract argument is invalid.
        ConformanceError: The last candidate's error if none conforms.
    """
    check_contract_arguments("first_conforming", contracts)
    last_error: ConformanceError | None = None
    for candidate in candidates:
        try:
            ensure_implements(candidate, *contracts)
        except ConformanceError as e:
            logger.debug("Rejected candidate: %s", e)
            last_error = e
            continue
        return candidate
    if last_error is None:
        raise UsageError("first_conforming called with no candidates")
    raise last_error
