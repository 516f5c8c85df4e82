"""Conformance core subpackage (Layer 1 -- depends only on diagnostics)."""

from conformlib.core.candidate import ViolationKind, describe_candidate
from conformlib.core.checker import audit, conforms, ensure_implements, first_conforming
from conformlib.core.contract import Contract, define_contract, merge_contracts
from conformlib.core.decorators import declared_contracts, implements, requires
from conformlib.core.errors import (
    ConformanceError,
    ContractDefinitionError,
    ContractError,
    UsageError,
)
from conformlib.core.report import ConformanceReport, Violation

__all__ = [
    "Contract",
    "define_contract",
    "merge_contracts",
    "ensure_implements",
    "conforms",
    "audit",
    "first_conforming",
    "implements",
    "requires",
    "declared_contracts",
    "ConformanceReport",
    "Violation",
    "ViolationKind",
    "describe_candidate",
    "ContractError",
    "ContractDefinitionError",
    "UsageError",
    "ConformanceError",
]
