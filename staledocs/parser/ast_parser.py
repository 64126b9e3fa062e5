"""Grammar parser: signature extraction from a Tree-sitter syntax tree."""

from tree_sitter import Node, Parser, Tree
from typing import List, Optional

from ..config import ExtractorKind
from ..exceptions import ExtractionError
from .base import SignatureExtractor
from .data_structures import ExtractedFunction
from .docstring_locator import extract_docstring
from .extractors import extract_function_name, extract_parameters, definition_line
from .language_config import PYTHON_CONFIG


def parse_source(code_bytes: bytes) -> Tree:
    """
    Parses Python source bytes with Tree-sitter.

    A new parser is created per call; parsers are not shared between threads.
    """
    parser = Parser()
    parser.language = PYTHON_CONFIG['language']
    return parser.parse(code_bytes)


def find_error_line(node: Node) -> Optional[int]:
    """Returns the 1-indexed line of the first ERROR or missing node, if any"""
    stack = [node]
    while stack:
        node = stack.pop()
        if node.type == 'ERROR' or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(child for child in reversed(node.children) if child.has_error)

    return None


class GrammarParser(SignatureExtractor):
    """Extracts signatures by walking the Tree-sitter grammar nodes."""

    kind = ExtractorKind.GRAMMAR

    def extract_file(self, source: str) -> List[ExtractedFunction]:
        """
        Parses a whole file and extracts every function definition.

        Args:
            source: Full text of one source file

        Returns:
            List of ExtractedFunction in textual order, nested functions included

        Raises:
            ExtractionError: If the file does not parse cleanly
        """
        code_bytes = source.encode('utf-8')
        root = parse_source(code_bytes).root_node

        if root.has_error:
            line = find_error_line(root)
            raise ExtractionError("syntax error", line=line)

        functions: List[ExtractedFunction] = []

        # Pre-order walk keeps functions in textual order, decorators and nesting included.
        # Explicit stack: expression nesting is unbounded.
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in PYTHON_CONFIG['function_types']:
                functions.append(self.extract_function(node, code_bytes))
            stack.extend(reversed(node.children))

        return functions

    def extract_function(self, node: Node, code_bytes: bytes) -> ExtractedFunction:
        """Extracts signature and docstring from one function_definition node"""
        name = extract_function_name(node)
        line = definition_line(node)

        return ExtractedFunction(
            signature=self.build_signature(name, line, extract_parameters(node, code_bytes)),
            docstring=extract_docstring(node, code_bytes),
        )
