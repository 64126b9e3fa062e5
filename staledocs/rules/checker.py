"""Consistency checks between a function signature and its docstring."""

from typing import List, Optional

from ..config import CheckConfig
from ..docstrings.data_structures import ParsedDocstring
from ..parser.data_structures import ArgPair, FunctionSignature
from .diagnostics import Diagnostic, DiagnosticKind


def normalize_type(annotation: Optional[str]) -> Optional[str]:
    """Collapses whitespace runs so multi-line annotations compare equal"""
    if annotation is None:
        return None
    return ' '.join(annotation.split())


def sequences_match(function_args: List[ArgPair], docstring_args: List[ArgPair],
                    tolerate_untyped: bool) -> bool:
    """
    Compares (name, type) sequences in order.

    Args:
        function_args: Pairs from the signature
        docstring_args: Pairs from the docstring's arguments section
        tolerate_untyped: Accept a documented argument without a type when
            the signature has one

    Returns:
        True if both sequences have the same names in the same order and
        compatible types
    """
    if len(function_args) != len(docstring_args):
        return False

    for (name, annotation), (doc_name, doc_annotation) in zip(function_args, docstring_args):
        if name != doc_name:
            return False
        if doc_annotation is None and annotation is not None and tolerate_untyped:
            continue
        if normalize_type(annotation) != normalize_type(doc_annotation):
            return False

    return True


def check_function(signature: FunctionSignature, parsed: Optional[ParsedDocstring],
                   config: CheckConfig, file_path: str) -> List[Diagnostic]:
    """
    Runs every check on one function.

    Checks are independent: an argument mismatch and untyped documented
    arguments are both reported for the same function.

    Args:
        signature: Extracted signature
        parsed: Parsed docstring, or None if the function has no docstring
        config: Strictness rules and docstring settings
        file_path: File the function lives in

    Returns:
        Diagnostics for this function, possibly empty
    """
    diagnostics: List[Diagnostic] = []
    name = signature.function_name
    line = signature.definition_line

    def report(kind: DiagnosticKind, message: str):
        diagnostics.append(Diagnostic(kind=kind, file=file_path, line=line, message=message))

    if parsed is None:
        if config.forbid_no_docstring:
            report(DiagnosticKind.MISSING_DOCSTRING, f"`{name}`: Docstring missing.")
        return diagnostics

    if not parsed.has_args_section:
        if config.forbid_no_args_in_docstring and signature.parameters:
            report(DiagnosticKind.MISSING_ARGS_SECTION, f"`{name}`: Args missing from docstring.")
        return diagnostics

    function_args = signature.as_pairs()
    docstring_args = parsed.as_pairs()
    tolerate_untyped = not config.forbid_untyped_docstrings

    if not sequences_match(function_args, docstring_args, tolerate_untyped):
        report(DiagnosticKind.ARGUMENT_MISMATCH,
               f"Args from function: {function_args}. Args from docstring: {docstring_args}.")

    if config.forbid_untyped_docstrings:
        for entry in parsed.args:
            if entry.type_annotation is None:
                report(DiagnosticKind.UNTYPED_DOC_ARG,
                       f"`{name}`: Docstring argument `{entry.name}` has no type.")

    return diagnostics
