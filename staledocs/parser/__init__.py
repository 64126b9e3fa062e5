"""
Parser module for staledocs.
Extracts function signatures and docstrings from Python source files.
"""

from ..config import ExtractorKind
from .ast_parser import GrammarParser
from .base import SignatureExtractor
from .data_structures import ExtractedFunction, FunctionSignature, Parameter, RawDocstring
from .directory_walker import discover_files
from .tokenizer import HeuristicTokenizer

EXTRACTORS = {
    ExtractorKind.TOKENIZER: HeuristicTokenizer,
    ExtractorKind.GRAMMAR: GrammarParser,
}


def get_extractor(kind: ExtractorKind, skip_args_and_kwargs: bool = False) -> SignatureExtractor:
    """Instantiate the extraction strategy selected by configuration"""
    return EXTRACTORS[kind](skip_args_and_kwargs=skip_args_and_kwargs)


__all__ = [
    'get_extractor',
    'discover_files',
    'SignatureExtractor',
    'HeuristicTokenizer',
    'GrammarParser',
    'ExtractedFunction',
    'FunctionSignature',
    'Parameter',
    'RawDocstring',
]
