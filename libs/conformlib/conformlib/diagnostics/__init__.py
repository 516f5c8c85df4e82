"""Conformance diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from conformlib.diagnostics.collector import DiagnosticCollector
from conformlib.diagnostics.diagnostic import Diagnostic
from conformlib.diagnostics.severity import DiagnosticSeverity
from conformlib.diagnostics.site import ViolationSite

__all__ = ["ViolationSite", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
