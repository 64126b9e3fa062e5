"""Aggregation of per-function diagnostics into file and run results."""

import threading
from typing import Iterable, List

from .diagnostics import Diagnostic, FileResult, RunResult, Severity


def make_file_result(file_path: str, diagnostics: Iterable[Diagnostic]) -> FileResult:
    """Groups a file's diagnostics, ordered by line (stable for equal lines)"""
    ordered = sorted(diagnostics, key=lambda d: d.line)
    return FileResult(file=file_path, diagnostics=tuple(ordered))


def build_run_result(file_results: Iterable[FileResult]) -> RunResult:
    """
    Reduces file results into a run result.

    File results are sorted by path, independent of completion order.
    The run succeeds iff no diagnostic has error severity.
    """
    ordered = tuple(sorted(file_results, key=lambda r: r.file))
    success = not any(
        d.severity is Severity.ERROR
        for result in ordered
        for d in result.diagnostics
    )
    return RunResult(file_results=ordered, success=success)


class ResultCollector:
    """Append-only collector of file results, safe to share between workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._results: List[FileResult] = []

    def add(self, file_result: FileResult):
        with self._lock:
            self._results.append(file_result)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def result(self) -> RunResult:
        """Run result over everything collected so far"""
        with self._lock:
            return build_run_result(list(self._results))
