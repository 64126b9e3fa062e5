"""Base interface for signature extraction strategies.

Both strategies turn Python source text into ``ExtractedFunction`` records
and share the parameter post-processing defined here, so that they agree
on receiver handling, starred parameters and positions.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..config import ExtractorKind
from ..exceptions import ExtractionError
from .data_structures import ArgPair, ExtractedFunction, FunctionSignature, Parameter
from .language_config import PYTHON_CONFIG


class SignatureExtractor(ABC):
    """Abstract base for the tokenizer and grammar extraction strategies."""

    kind: ExtractorKind

    def __init__(self, skip_args_and_kwargs: bool = False):
        self.skip_args_and_kwargs = skip_args_and_kwargs

    @abstractmethod
    def extract_file(self, source: str) -> List[ExtractedFunction]:
        """Extract every function definition of a file, in textual order.

        Args:
            source: Full text of one source file

        Returns:
            List of ExtractedFunction, nested functions included

        Raises:
            ExtractionError: If a function header cannot be extracted
        """
        ...

    def extract(self, source: str, span: Tuple[int, int]) -> FunctionSignature:
        """Extract the signature of the function defined within a line span.

        Args:
            source: Full text of one source file
            span: 1-indexed, inclusive (first_line, last_line) range holding the header

        Returns:
            Signature of the first function whose ``def`` lies in the span
        """
        first_line, last_line = span
        for function in self.extract_file(source):
            if first_line <= function.signature.definition_line <= last_line:
                return function.signature
        raise ExtractionError(f"no function definition between lines {first_line} and {last_line}",
                              line=first_line)

    def build_signature(self, function_name: str, definition_line: int,
                        raw_params: Sequence[ArgPair]) -> FunctionSignature:
        """Turn raw (name, type) pairs into a FunctionSignature.

        Drops a conventional receiver in first position and, when configured,
        ``*args``/``**kwargs``. Positions are assigned after filtering.
        """
        params = list(raw_params)
        if params and params[0][0] in PYTHON_CONFIG['receiver_names']:
            params = params[1:]
        if self.skip_args_and_kwargs:
            params = [p for p in params if not p[0].startswith('*')]

        seen = set()
        parameters = []
        for position, (name, annotation) in enumerate(params):
            if name in seen:
                raise ExtractionError(f"duplicate argument '{name}' in '{function_name}'",
                                      line=definition_line)
            seen.add(name)
            parameters.append(Parameter(name=name, type_annotation=annotation, position=position))

        return FunctionSignature(
            function_name=function_name,
            definition_line=definition_line,
            parameters=tuple(parameters),
        )
