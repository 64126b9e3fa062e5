"""Language configuration for the staledocs parser."""

from tree_sitter import Language
import tree_sitter_python
from typing import Dict, Any

# Language configuration
PYTHON_CONFIG = {
    'name': 'python',
    'extensions': ['.py', '.pyi'],
    'language': Language(tree_sitter_python.language()),
    'function_types': ['function_definition'],
    'parameter_list': 'parameters',
    'docstring_types': ['string', 'concatenated_string'],
    # First parameters that stand for the receiver of a method call
    'receiver_names': ['self', 'cls', 'mcs'],
}

# Registry of supported languages
LANGUAGE_REGISTRY: Dict[str, Dict[str, Any]] = {
    ext: PYTHON_CONFIG for ext in PYTHON_CONFIG['extensions']
}


def is_supported(file_extension: str) -> bool:
    """Whether files with this extension are checked"""
    return file_extension in LANGUAGE_REGISTRY
