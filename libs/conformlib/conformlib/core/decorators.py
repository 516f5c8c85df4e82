"""Decorators that run conformance checks at class definition and call boundaries."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from conformlib.core.checker import check_contract_arguments, ensure_implements
from conformlib.core.contract import Contract
from conformlib.core.errors import UsageError

C = TypeVar("C", bound=type)
F = TypeVar("F", bound=Callable[..., Any])


def implements(*contracts: Contract) -> Callable[[C], C]:
    """Class decorator: verify the class provides every operation and record the contracts.

    The check runs once, when the class is defined. Declared contracts are
    appended to any inherited from base classes and are available through
    :func:`declared_contracts`.
    """
    check_contract_arguments("implements", contracts, leading=0)

    def decorate(cls: C) -> C:
        if not isinstance(cls, type):
            raise UsageError(f"@implements can only decorate classes, got {type(cls).__name__}")
        ensure_implements(cls, *contracts, label=cls.__qualname__)
        inherited = getattr(cls, "__contracts__", ())
        cls.__contracts__ = tuple(dict.fromkeys((*inherited, *contracts)))
        return cls

    return decorate


def declared_contracts(obj: Any) -> tuple[Contract, ...]:
    """Return the contracts recorded by ``@implements`` on *obj* or its class."""
    return tuple(getattr(obj, "__contracts__", ()))


def requires(**params: Contract | tuple[Contract, ...]) -> Callable[[F], F]:
    """Function decorator: check the named arguments against contracts on every call.

    Example::

        @requires(shape=Drawable, target=(Surface, Resizable))
        def render(shape, target): ...

    Arguments left to their default value are not checked.
    """
    checks: dict[str, tuple[Contract, ...]] = {}
    for param, spec in params.items():
        contracts = spec if isinstance(spec, tuple) else (spec,)
        check_contract_arguments(f"requires({param}=...)", contracts, leading=0)
        checks[param] = contracts

    def decorate(func: F) -> F:
        sig = inspect.signature(func)
        unknown = sorted(set(checks) - set(sig.parameters))
        if unknown:
            raise UsageError(
                f"{func.__qualname__} has no parameter(s) named {', '.join(unknown)}"
            )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind(*args, **kwargs)
            for param, contracts in checks.items():
                if param in bound.arguments:
                    ensure_implements(
                        bound.arguments[param],
                        *contracts,
                        label=f"argument '{param}' of {func.__qualname__}",
                    )
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorate
