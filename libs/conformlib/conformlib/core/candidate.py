"""Member lookup on candidate objects."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ViolationKind(Enum):
    """Why a required operation was rejected."""

    ABSENT = "absent"
    NOT_CALLABLE = "not_callable"

    def __str__(self) -> str:
        return self.value


_MISSING = object()


def lookup_member(candidate: Any, name: str) -> Any:
    """Return the member *name* of *candidate*, or ``_MISSING``.

    Mappings are looked up by key first, so a dict literal's entries are not
    hidden by dict's own methods; attributes are the fallback. Exceptions
    other than ``AttributeError``/``KeyError`` raised by the lookup propagate.
    """
    if isinstance(candidate, Mapping):
        try:
            return candidate[name]
        except KeyError:
            pass
    return getattr(candidate, name, _MISSING)


def inspect_member(candidate: Any, name: str) -> tuple[ViolationKind | None, Any]:
    """Look *name* up once; return ``(None, value)`` if callable, else ``(why not, value)``."""
    value = lookup_member(candidate, name)
    if value is _MISSING:
        return ViolationKind.ABSENT, None
    if not callable(value):
        return ViolationKind.NOT_CALLABLE, value
    return None, value


def describe_candidate(candidate: Any, label: str | None = None) -> str:
    """Identify a candidate for diagnostics: the caller's label or its identity."""
    if label is not None:
        return label
    return f"<{type(candidate).__name__} object at {id(candidate):#x}>"
