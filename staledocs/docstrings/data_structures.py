"""Data structures for parsed docstrings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..parser.data_structures import ArgPair


class DocStyle(Enum):
    """Supported docstring conventions."""
    GOOGLE = "google"
    NUMPY = "numpy"


@dataclass(frozen=True)
class DocArgEntry:
    """An argument as listed in a docstring's arguments section"""
    name: str
    type_annotation: Optional[str] = None
    position: int = 0


@dataclass(frozen=True)
class ParsedDocstring:
    """Structured view of a docstring's arguments section"""
    style: DocStyle
    has_args_section: bool
    args: Tuple[DocArgEntry, ...] = field(default_factory=tuple)

    def as_pairs(self) -> List[ArgPair]:
        """Returns the documented arguments as (name, type) pairs in section order."""
        return [(a.name, a.type_annotation) for a in self.args]
