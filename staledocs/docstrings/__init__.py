"""
Docstring module for staledocs.
Detects the docstring convention and reads its arguments section.
"""

from .data_structures import DocArgEntry, DocStyle, ParsedDocstring
from .style import detect_style, parse_docstring

__all__ = ['detect_style', 'parse_docstring', 'DocArgEntry', 'DocStyle', 'ParsedDocstring']
