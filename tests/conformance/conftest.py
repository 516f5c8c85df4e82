"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.audit_runner import AuditRunner
from tests.conformance.runners.ensure_runner import EnsureRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [EnsureRunner(), AuditRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - ensure: fail-fast ensure_implements
    - audit: aggregating audit, compared on its first violation
    """
    return request.param
