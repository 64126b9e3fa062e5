"""Locates the docstring literal at the top of a function body."""

import re
from typing import Callable, List, Optional, Sequence

from tree_sitter import Node

from .data_structures import RawDocstring
from .language_config import PYTHON_CONFIG

LITERAL_RE = re.compile(r"^([A-Za-z]*)('''|\"\"\"|'|\")(.*)\2$", re.DOTALL)


def literal_body(literal: str) -> Optional[str]:
    """
    Returns the text between the quotes of a string literal.

    Byte strings and f-strings are not docstrings, so None is returned
    for them, as for anything that is not a complete literal.
    """
    match = LITERAL_RE.match(literal.strip())
    if not match:
        return None

    prefix = match.group(1).lower()
    if 'b' in prefix or 'f' in prefix:
        return None

    return match.group(3)


def join_literals(literals: Sequence[str]) -> Optional[str]:
    """Body of implicitly concatenated literals, or None if any part is not a plain string"""
    bodies = [literal_body(literal) for literal in literals]
    if not bodies or any(body is None for body in bodies):
        return None
    return ''.join(bodies)


def extract_docstring(node: Node, code_bytes: bytes) -> Optional[RawDocstring]:
    """
    Extracts the docstring from a function_definition node.
    In Python, docstring is the first statement if it's a string literal.
    """
    body = node.child_by_field_name('body')
    if not body or not body.children:
        return None

    for child in body.children:
        if child.type == 'comment':
            continue
        # Docstring is always first non-comment statement
        expressions = [c for c in child.named_children if c.type != 'comment']
        if child.type != 'expression_statement' or len(expressions) != 1:
            return None

        literal = expressions[0]
        # ("""Doc.""") is still a docstring
        while literal.type == 'parenthesized_expression':
            inner = [c for c in literal.named_children if c.type != 'comment']
            if len(inner) != 1:
                return None
            literal = inner[0]

        if literal.type not in PYTHON_CONFIG['docstring_types']:
            return None

        if literal.type == 'concatenated_string':
            parts = [part for part in literal.named_children if part.type == 'string']
        else:
            parts = [literal]

        text = join_literals([
            code_bytes[part.start_byte:part.end_byte].decode('utf-8', errors='ignore')
            for part in parts
        ])
        if text is None:
            return None
        return RawDocstring(text=text, start_line=literal.start_point[0] + 1)

    return None


def docstring_from_tokens(tokens: List, index: int,
                          line_of: Callable[[int], int]) -> Optional[RawDocstring]:
    """
    Extracts the docstring from a token stream.

    Args:
        tokens: Tokens of the whole file, as produced by the heuristic tokenizer
        index: Index of the first token after the colon closing a function header
        line_of: Maps a character offset to its 1-indexed line

    Returns:
        RawDocstring if the first statement of the body is a string literal, else None
    """
    pos = index
    while pos < len(tokens) and tokens[pos].kind in ('newline', 'comment'):
        pos += 1

    opened = 0
    while pos < len(tokens) and tokens[pos].value == '(':
        opened += 1
        pos += 1

    literals = []
    while pos < len(tokens):
        token = tokens[pos]
        if token.kind == 'string':
            literals.append(token)
        elif not (opened and token.kind in ('newline', 'comment')):
            break
        pos += 1

    if not literals:
        return None

    for _ in range(opened):
        while pos < len(tokens) and tokens[pos].kind in ('newline', 'comment'):
            pos += 1
        if pos >= len(tokens) or tokens[pos].value != ')':
            return None
        pos += 1

    # The literal has to be a statement on its own, not part of an expression
    if pos < len(tokens):
        following = tokens[pos]
        if following.kind not in ('newline', 'comment') and following.value != ';':
            return None

    text = join_literals([literal.value for literal in literals])
    if text is None:
        return None
    return RawDocstring(text=text, start_line=line_of(literals[0].start))
