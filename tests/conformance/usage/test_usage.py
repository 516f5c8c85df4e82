"""
Conformance: calling a checker incorrectly is a usage error, never a verdict
"""
import pytest

from conformlib import UsageError, define_contract
from tests.conformance.helpers import make_candidate, method

Movable = define_contract("Movable", ["move_to", "stop"])

CASES = [
    ("no_contracts", ()),
    ("string_instead_of_contract", ("Movable",)),
    ("list_instead_of_contract", (["move_to", "stop"],)),
    ("dict_instead_of_contract", ({"name": "Movable", "operations": ["move_to"]},)),
    ("valid_then_invalid", (Movable, None)),
]


@pytest.mark.parametrize("description,contracts", CASES, ids=[c[0] for c in CASES])
def test_usage(runner, description, contracts):
    """Arity and argument types are checked before any member lookup."""
    with pytest.raises(UsageError):
        runner.check(make_candidate({}), *contracts)


def test_usage_error_on_conforming_candidate(runner):
    with pytest.raises(UsageError):
        runner.check(make_candidate({"move_to": method, "stop": method}), Movable, "extra")
