"""Candidate builders shared by the conformance cases."""

from types import SimpleNamespace


def method(*args, **kwargs):
    return None


def make_candidate(members: dict) -> SimpleNamespace:
    """Build a candidate object whose attributes are *members*."""
    return SimpleNamespace(**members)
