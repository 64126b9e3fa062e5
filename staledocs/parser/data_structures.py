"""Data structures for the signature side of the pipeline."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# (name, type annotation) pair used when comparing signatures and docstrings
ArgPair = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class Parameter:
    """One comparison-eligible parameter of a function"""
    name: str
    type_annotation: Optional[str] = None
    position: int = 0


@dataclass(frozen=True)
class FunctionSignature:
    """Ordered parameter list of a function definition"""
    function_name: str
    definition_line: int
    parameters: Tuple[Parameter, ...] = field(default_factory=tuple)

    def as_pairs(self) -> List[ArgPair]:
        """Returns the parameters as (name, type) pairs in declaration order."""
        return [(p.name, p.type_annotation) for p in self.parameters]


@dataclass(frozen=True)
class RawDocstring:
    """Body of a docstring literal and the line its literal starts on"""
    text: str
    start_line: int


@dataclass(frozen=True)
class ExtractedFunction:
    """A signature together with the docstring found right after it"""
    signature: FunctionSignature
    docstring: Optional[RawDocstring] = None
