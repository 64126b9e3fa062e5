"""Diagnostics produced by the consistency checker."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Severity(Enum):
    """How a diagnostic affects the outcome of a run."""
    ERROR = "error"  # fails the run


class DiagnosticKind(Enum):
    """Kinds of problems found in a file."""
    MISSING_DOCSTRING = "MissingDocstring"
    MISSING_ARGS_SECTION = "MissingArgsSection"
    ARGUMENT_MISMATCH = "ArgumentMismatch"
    UNTYPED_DOC_ARG = "UntypedDocArg"
    PARSE_FAILURE = "ParseFailure"

    @property
    def severity(self) -> Severity:
        return KIND_SEVERITY[self]


KIND_SEVERITY = {kind: Severity.ERROR for kind in DiagnosticKind}


@dataclass(frozen=True)
class Diagnostic:
    """One problem, located by file and line"""
    kind: DiagnosticKind
    file: str
    line: int
    message: str

    @property
    def severity(self) -> Severity:
        return self.kind.severity

    def format(self) -> str:
        """Log line form: ``<file>: Line <line>: <message>``"""
        return f"{self.file}: Line {self.line}: {self.message}"


@dataclass(frozen=True)
class FileResult:
    """Diagnostics of one file, ordered by line"""
    file: str
    diagnostics: Tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.diagnostics)


@dataclass(frozen=True)
class RunResult:
    """All file results of a run, ordered by path"""
    file_results: Tuple[FileResult, ...] = field(default_factory=tuple)
    success: bool = True

    @property
    def files_with_errors(self) -> int:
        return sum(1 for result in self.file_results if result.has_errors)

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(d for result in self.file_results for d in result.diagnostics)
