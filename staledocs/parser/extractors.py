"""Extraction functions for Tree-sitter function_definition nodes."""

from tree_sitter import Node
from typing import List, Optional

from ..exceptions import ExtractionError
from .data_structures import ArgPair
from .language_config import PYTHON_CONFIG

SPLAT_PREFIXES = {
    'list_splat_pattern': '*',
    'dictionary_splat_pattern': '**',
}

# Parameter list children that carry no parameter
SKIPPED_PARAMETER_TYPES = {'keyword_separator', 'positional_separator', 'comment', '(', ')', ','}


def node_text(node: Node, code_bytes: bytes) -> str:
    """Source text covered by a node"""
    return code_bytes[node.start_byte:node.end_byte].decode('utf-8', errors='ignore')


def extract_function_name(node: Node) -> str:
    """Name of a function_definition node"""
    name_node = node.child_by_field_name('name')
    return name_node.text.decode('utf-8') if name_node else 'anonymous'


def definition_line(node: Node) -> int:
    """1-indexed line of the ``def`` keyword (not of ``async`` or decorators)"""
    for child in node.children:
        if child.type == 'def':
            return child.start_point[0] + 1
    return node.start_point[0] + 1


def _parameter_name(node: Node, code_bytes: bytes) -> Optional[str]:
    """Name of a parameter pattern, with a star prefix for *args / **kwargs"""
    if node.type == 'identifier':
        return node_text(node, code_bytes)

    if node.type in SPLAT_PREFIXES:
        for child in node.named_children:
            if child.type == 'identifier':
                return SPLAT_PREFIXES[node.type] + node_text(child, code_bytes)

    return None


def extract_parameters(node: Node, code_bytes: bytes) -> List[ArgPair]:
    """
    Extracts function parameters with type hints.

    Keyword-only and positional-only markers are skipped. Receiver filtering
    is left to the caller.

    Returns:
        List of (name, type) pairs in declaration order

    Raises:
        ExtractionError: For parameter forms that have no single name
    """
    params: List[ArgPair] = []
    params_node = node.child_by_field_name(PYTHON_CONFIG['parameter_list'])

    if not params_node:
        return params

    for child in params_node.children:
        if child.type in SKIPPED_PARAMETER_TYPES:
            continue

        param_name = None
        param_type = None

        if child.type in ('identifier', 'list_splat_pattern', 'dictionary_splat_pattern'):
            # Simple parameter without type hint
            param_name = _parameter_name(child, code_bytes)

        elif child.type == 'typed_parameter':
            # Parameter with type hint: name: type
            for subchild in child.named_children:
                if subchild.type == 'type':
                    param_type = node_text(subchild, code_bytes)
                elif param_name is None:
                    param_name = _parameter_name(subchild, code_bytes)

        elif child.type in ('default_parameter', 'typed_default_parameter'):
            # name = value, or name: type = value
            name_node = child.child_by_field_name('name')
            type_node = child.child_by_field_name('type')
            if name_node is not None:
                param_name = _parameter_name(name_node, code_bytes)
            if type_node is not None:
                param_type = node_text(type_node, code_bytes)

        if param_name is None:
            raise ExtractionError(
                f"unsupported parameter {node_text(child, code_bytes)!r}",
                line=child.start_point[0] + 1,
            )

        params.append((param_name, param_type))

    return params
