"""Run configuration for staledocs."""

from dataclasses import dataclass
from enum import Enum


class StyleMode(Enum):
    """How the docstring convention is chosen."""
    AUTO = "auto"      # Google first, then NumPy
    GOOGLE = "google"
    NUMPY = "numpy"


class SectionEnd(Enum):
    """Where an arguments section stops."""
    NEXT_HEADER = "next_header"  # next section header (default)
    EMPTY_LINE = "empty_line"    # first blank line, or a header


class ExtractorKind(Enum):
    """Signature extraction strategies."""
    TOKENIZER = "tokenizer"  # heuristic token scan
    GRAMMAR = "grammar"      # tree-sitter syntax tree


@dataclass(frozen=True)
class CheckConfig:
    """Immutable settings shared by every stage of a run."""
    docstyle: StyleMode = StyleMode.AUTO
    section_end: SectionEnd = SectionEnd.NEXT_HEADER
    forbid_no_docstring: bool = False
    forbid_no_args_in_docstring: bool = False
    forbid_untyped_docstrings: bool = False
    skip_args_and_kwargs: bool = False
    extractor: ExtractorKind = ExtractorKind.TOKENIZER
    fallback: bool = True
