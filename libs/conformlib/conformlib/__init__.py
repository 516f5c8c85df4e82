"""conformlib: runtime interface-conformance checks for duck-typed objects.

Typical use::

    from conformlib import define_contract, ensure_implements

    Movable = define_contract("Movable", ["move_to", "stop"])
    ensure_implements(robot, Movable)
"""

from conformlib.core import (
    ConformanceError,
    ConformanceReport,
    Contract,
    ContractDefinitionError,
    ContractError,
    UsageError,
    Violation,
    ViolationKind,
    audit,
    conforms,
    declared_contracts,
    define_contract,
    ensure_implements,
    first_conforming,
    implements,
    merge_contracts,
    requires,
)
from conformlib.registry import ContractSet, RegistryError, load_contracts, parse_contracts

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
    "ContractSet",
    "load_contracts",
    "parse_contracts",
    "ContractError",
    "ContractDefinitionError",
    "UsageError",
    "ConformanceError",
    "RegistryError",
]
