"""Contract registry subpackage (Layer 2 -- depends on core)."""

from conformlib.registry.errors import RegistryError
from conformlib.registry.loader import (
    ContractSet,
    build_contracts,
    load_contracts,
    parse_contracts,
)

__all__ = [
    "ContractSet",
    "RegistryError",
    "build_contracts",
    "load_contracts",
    "parse_contracts",
]
