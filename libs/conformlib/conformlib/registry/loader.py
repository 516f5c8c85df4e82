"""Load contract definitions from a YAML registry file.

A registry declares each contract once::

    version: "1.0"
    contracts:
      Movable:
        description: Things that can be moved.
        operations: [move_to, stop]
      Vehicle:
        extends: [Movable]
        operations: [refuel]

``extends`` may only name contracts declared earlier in the same file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from conformlib.core.contract import Contract, define_contract, merge_contracts
from conformlib.registry.errors import RegistryError

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.json")


def load_schema() -> dict:
    """Load the JSON Schema every registry document must satisfy."""
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_SCHEMA = load_schema()


class ContractSet(Mapping[str, Contract]):
    """Immutable, ordered mapping of contract name to contract."""

    def __init__(
        self,
        contracts: Mapping[str, Contract],
        version: str,
        source: str = "<string>",
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self._contracts = dict(contracts)
        self._descriptions = dict(descriptions or {})
        self.version = version
        self.source = source

    def __getitem__(self, name: str) -> Contract:
        return self._contracts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._contracts)

    def __len__(self) -> int:
        return len(self._contracts)

    def __repr__(self) -> str:
        return f"ContractSet({list(self._contracts)!r}, version={self.version!r})"

    def description(self, name: str) -> str | None:
        """Return the optional description of contract *name*."""
        if name not in self._contracts:
            raise KeyError(name)
        return self._descriptions.get(name)

    def total_operations(self) -> int:
        return sum(len(c) for c in self._contracts.values())


def _build_entry(
    name: str, entry: dict, known: Mapping[str, Contract], source: str
) -> Contract:
    operations = entry.get("operations", [])
    parents: list[Contract] = []
    for parent in entry.get("extends", []):
        if parent not in known:
            raise RegistryError(
                f"Contract '{name}' extends undeclared contract '{parent}'", source
            )
        parents.append(known[parent])

    if parents:
        return merge_contracts(name, *parents, operations=operations)
    return define_contract(name, operations)


def validate_schema(data: Any, source: str = "<string>") -> None:
    """Check a parsed registry document against the registry schema.

    Raises:
        RegistryError: Describing the most relevant schema violation.
    """
    try:
        jsonschema.validate(instance=data, schema=_SCHEMA)
    except jsonschema.ValidationError as e:
        where = " -> ".join(str(p) for p in e.absolute_path) or "<root>"
        raise RegistryError(f"Schema validation error at {where}: {e.message}", source) from e


def build_contracts(data: Any, source: str = "<string>") -> ContractSet:
    """
    Build a ContractSet from an already-parsed registry document.

    Raises:
        RegistryError: If the document structure is invalid.
        ContractDefinitionError: If a contract definition is malformed.
    """
    validate_schema(data, source)
    version = data["version"]
    entries = data["contracts"]

    contracts: dict[str, Contract] = {}
    descriptions: dict[str, str] = {}
    for name, entry in entries.items():
        if not isinstance(name, str):
            raise RegistryError(f"Contract names must be strings, got {name!r}", source)
        contracts[name] = _build_entry(name, entry, contracts, source)
        description = entry.get("description")
        if description is not None:
            descriptions[name] = description

    logger.debug("Loaded %d contract(s) from %s", len(contracts), source)
    return ContractSet(contracts, version, source, descriptions)


def parse_contracts(text: str, source: str = "<string>") -> ContractSet:
    """Parse YAML registry text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RegistryError(f"Invalid YAML: {e}", source) from e
    return build_contracts(data, source)


def load_contracts(path: str | Path) -> ContractSet:
    """Load a YAML registry file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryError(f"Cannot read registry: {e.strerror or e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise RegistryError(
            f"Registry is not valid UTF-8: {e.reason} at byte {e.start}", str(path)
        ) from e
    return parse_contracts(text, str(path))
