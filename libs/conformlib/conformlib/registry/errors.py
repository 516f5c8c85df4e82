"""Error type for malformed contract registry files."""

from __future__ import annotations

from conformlib.core.errors import ContractError


class RegistryError(ContractError):
    """Raised when a contract registry cannot be loaded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source
