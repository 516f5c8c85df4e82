"""Contract values: a name plus the ordered operations a candidate must expose."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from conformlib.core.errors import ContractDefinitionError, UsageError


@dataclass(frozen=True)
class Contract:
    """A named, immutable set of required operation names.

    The invariants are checked on every construction, so holding a
    ``Contract`` means holding a valid one.
    """

    name: str
    operations: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ContractDefinitionError(
                f"Contract name must be a non-empty string, got {self.name!r}"
            )
        if isinstance(self.operations, (str, bytes)) or not isinstance(
            self.operations, Sequence
        ):
            raise ContractDefinitionError(
                f"Contract {self.name} expects a sequence of operation names, "
                f"got {type(self.operations).__name__}",
                self.name,
            )
        operations = tuple(self.operations)
        if not operations:
            raise ContractDefinitionError(
                f"Contract {self.name} must require at least one operation", self.name
            )
        seen: set[str] = set()
        for op in operations:
            if not isinstance(op, str):
                raise ContractDefinitionError(
                    f"Contract {self.name} operation names must be strings, "
                    f"got {type(op).__name__}",
                    self.name,
                )
            if not op.strip():
                raise ContractDefinitionError(
                    f"Contract {self.name} has an empty operation name", self.name, op
                )
            if op in seen:
                raise ContractDefinitionError(
                    f"Duplicate operation {op} in contract {self.name}", self.name, op
                )
            seen.add(op)
        object.__setattr__(self, "operations", operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def __contains__(self, operation: object) -> bool:
        return operation in self.operations

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.operations)})"


def define_contract(name: str, operations: Sequence[str]) -> Contract:
    """
    Define a contract.

    Args:
        name: Human-readable contract name, used in diagnostics.
        operations: Required operation names, in reporting order.

    Returns:
        The immutable contract.

    Raises:
        ContractDefinitionError: If the name is empty, or the operations are
            empty, blank, duplicated or not strings.
    """
    return Contract(name, operations)


def merge_contracts(
    name: str, *contracts: Contract, operations: Sequence[str] = ()
) -> Contract:
    """Derive a contract requiring everything *contracts* require plus *operations*.

    Inherited operations come first, in the order the parents are given.
    Operations shared by several parents are kept once.
    """
    for index, parent in enumerate(contracts):
        if not isinstance(parent, Contract):
            raise UsageError(
                f"merge_contracts expects Contract instances, "
                f"argument {index + 1} is {type(parent).__name__}"
            )
    if isinstance(operations, (str, bytes)):
        raise ContractDefinitionError(
            f"Contract {name} expects a sequence of operation names, got str", name
        )
    # Validates the new operations on their own, so duplicates there still fail.
    own = Contract(name, operations).operations if operations else ()
    merged: list[str] = []
    for op in [*(op for parent in contracts for op in parent), *own]:
        if op not in merged:
            merged.append(op)
    return Contract(name, tuple(merged))
