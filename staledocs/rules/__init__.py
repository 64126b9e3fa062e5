"""
Rules module for staledocs.
Cross-checks signatures against docstrings and aggregates diagnostics.
"""

from .aggregator import ResultCollector, build_run_result, make_file_result
from .checker import check_function
from .diagnostics import Diagnostic, DiagnosticKind, FileResult, RunResult, Severity

__all__ = [
    'check_function',
    'build_run_result',
    'make_file_result',
    'ResultCollector',
    'Diagnostic',
    'DiagnosticKind',
    'FileResult',
    'RunResult',
    'Severity',
]
