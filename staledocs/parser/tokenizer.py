"""Heuristic tokenizer: fast signature extraction by token scanning.

The tokenizer never builds a syntax tree. It splits the file into a flat
token stream, looks for ``def`` keywords and reads the parenthesized
parameter list that follows, tracking bracket depth so that commas, colons
and equals signs nested in annotations or default values are not mistaken
for separators. Anything it does not recognize raises ``ExtractionError``,
letting the caller fall back to the grammar parser.
"""

import bisect
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import ExtractorKind
from ..exceptions import ExtractionError
from .base import SignatureExtractor
from .data_structures import ArgPair, ExtractedFunction
from .docstring_locator import docstring_from_tokens

TOKEN_RE = re.compile(r"""
    (?P<string>[rRbBuUfF]{0,2}
        (?:'''(?:\\.|[^\\])*?'''
          |\"\"\"(?:\\.|[^\\])*?\"\"\"
          |'(?:\\.|[^\\'\n])*'
          |"(?:\\.|[^\\"\n])*"))
  | (?P<comment>\#[^\n]*)
  | (?P<continuation>\\\r?\n)
  | (?P<newline>\r?\n)
  | (?P<space>[ \t\f\r]+)
  | (?P<name>[^\W\d]\w*)
  | (?P<number>\d[\w.]*)
  | (?P<op>->|\*\*|[^\s\w])
""", re.VERBOSE | re.DOTALL)

SKIPPED_KINDS = ('space', 'continuation')
OPENERS = {'(': ')', '[': ']', '{': '}'}
CLOSERS = {')', ']', '}'}
# Stray characters that only show up around broken literals
BAD_OPS = {'"', "'", '\\'}


@dataclass(frozen=True)
class Token:
    """A lexical token with its character span in the source"""
    kind: str
    value: str
    start: int
    end: int


class LineIndex:
    """Maps character offsets to 1-indexed line numbers"""

    def __init__(self, source: str):
        self.line_starts = [0] + [m.end() for m in re.finditer('\n', source)]

    def line_of(self, offset: int) -> int:
        return bisect.bisect_right(self.line_starts, offset)


def tokenize(source: str) -> List[Token]:
    """Splits source text into tokens, dropping whitespace and line continuations."""
    return [
        Token(kind=match.lastgroup, value=match.group(), start=match.start(), end=match.end())
        for match in TOKEN_RE.finditer(source)
        if match.lastgroup not in SKIPPED_KINDS
    ]


def _token_at(tokens: List[Token], pos: int) -> Optional[Token]:
    return tokens[pos] if pos < len(tokens) else None


class HeuristicTokenizer(SignatureExtractor):
    """Extracts signatures by scanning tokens, without a full grammar."""

    kind = ExtractorKind.TOKENIZER

    def extract_file(self, source: str) -> List[ExtractedFunction]:
        tokens = tokenize(source)
        lines = LineIndex(source)

        functions = []
        for index, token in enumerate(tokens):
            if token.kind == 'name' and token.value == 'def':
                functions.append(self._read_function(source, tokens, index, lines))

        return functions

    def _read_function(self, source: str, tokens: List[Token], index: int,
                       lines: LineIndex) -> ExtractedFunction:
        """Reads one function, starting from its ``def`` token."""
        line = lines.line_of(tokens[index].start)

        name_token = _token_at(tokens, index + 1)
        if name_token is None or name_token.kind != 'name':
            raise ExtractionError("malformed function header", line=line)
        function_name = name_token.value

        pos = index + 2
        token = _token_at(tokens, pos)
        if token is not None and token.value == '[':
            # Type parameter list: def f[T](x: T)
            pos = self._skip_group(tokens, pos, line)
            token = _token_at(tokens, pos)

        if token is None or token.value != '(':
            raise ExtractionError(f"expected '(' after 'def {function_name}'", line=line)

        raw_params, pos = self._read_parameters(source, tokens, pos + 1, function_name, lines)
        colon = self._find_header_end(tokens, pos, function_name, line)

        return ExtractedFunction(
            signature=self.build_signature(function_name, line, raw_params),
            docstring=docstring_from_tokens(tokens, colon + 1, lines.line_of),
        )

    def _read_parameters(self, source: str, tokens: List[Token], pos: int,
                         function_name: str, lines: LineIndex) -> Tuple[List[ArgPair], int]:
        """
        Reads a parameter list up to its closing parenthesis.

        Args:
            source: Full source text, used to slice annotation text
            tokens: Token stream of the file
            pos: Index of the first token after the opening parenthesis
            function_name: Name of the function, for error messages
            lines: Line index of the source

        Returns:
            Tuple of raw (name, type) pairs and the index after the closing parenthesis
        """
        params: List[ArgPair] = []
        stack: List[str] = []
        current: List[Tuple[Token, int]] = []

        while True:
            token = _token_at(tokens, pos)
            if token is None:
                raise ExtractionError(f"unterminated parameter list in '{function_name}'",
                                      line=lines.line_of(tokens[pos - 1].start))
            pos += 1

            if token.kind in ('newline', 'comment'):
                continue
            if token.kind == 'op' and token.value in BAD_OPS:
                raise ExtractionError(f"unrecognized token {token.value!r} in '{function_name}'",
                                      line=lines.line_of(token.start))
            if token.kind == 'name' and token.value == 'lambda' and not stack:
                raise ExtractionError(f"unsupported lambda default in '{function_name}'",
                                      line=lines.line_of(token.start))

            if token.kind == 'op' and token.value in OPENERS:
                current.append((token, len(stack)))
                stack.append(token.value)
            elif token.kind == 'op' and token.value in CLOSERS:
                if not stack:
                    if token.value != ')':
                        raise ExtractionError(f"unbalanced {token.value!r} in '{function_name}'",
                                              line=lines.line_of(token.start))
                    self._add_parameter(source, current, params, function_name, lines)
                    return params, pos
                if OPENERS[stack.pop()] != token.value:
                    raise ExtractionError(f"mismatched {token.value!r} in '{function_name}'",
                                          line=lines.line_of(token.start))
                current.append((token, len(stack)))
            elif token.value == ',' and not stack:
                self._add_parameter(source, current, params, function_name, lines)
                current = []
            else:
                current.append((token, len(stack)))

    def _add_parameter(self, source: str, items: List[Tuple[Token, int]],
                       params: List[ArgPair], function_name: str, lines: LineIndex):
        """Splits one parameter into name and annotation, ignoring its default value."""
        if not items:
            # trailing comma
            return

        line = lines.line_of(items[0][0].start)
        head = items
        for i, (token, depth) in enumerate(items):
            if depth == 0 and token.kind == 'op' and token.value == '=':
                if i == len(items) - 1:
                    raise ExtractionError(f"missing default value in '{function_name}'", line=line)
                head = items[:i]
                break

        name_part, type_part = head, []
        for i, (token, depth) in enumerate(head):
            if depth == 0 and token.kind == 'op' and token.value == ':':
                name_part, type_part = head[:i], head[i + 1:]
                if not type_part:
                    raise ExtractionError(f"missing annotation in '{function_name}'", line=line)
                break

        values = [token.value for token, _ in name_part]
        kinds = [token.kind for token, _ in name_part]

        if values in (['*'], ['/']):
            # Keyword-only and positional-only markers have no name
            return
        if kinds == ['name']:
            name = values[0]
        elif len(values) == 2 and values[0] in ('*', '**') and kinds[1] == 'name':
            name = values[0] + values[1]
        else:
            text = source[items[0][0].start:items[-1][0].end]
            raise ExtractionError(f"unrecognized parameter {text!r} in '{function_name}'", line=line)

        annotation = None
        if type_part:
            annotation = source[type_part[0][0].start:type_part[-1][0].end]

        params.append((name, annotation))

    def _find_header_end(self, tokens: List[Token], pos: int, function_name: str, line: int) -> int:
        """Returns the index of the colon that ends a function header."""
        stack: List[str] = []
        token = _token_at(tokens, pos)
        if token is None or token.value not in ('->', ':'):
            raise ExtractionError(f"malformed header of '{function_name}'", line=line)

        while token is not None:
            if token.kind == 'op':
                if token.value in OPENERS:
                    stack.append(token.value)
                elif token.value in CLOSERS:
                    if not stack or OPENERS[stack.pop()] != token.value:
                        raise ExtractionError(f"unbalanced return annotation in '{function_name}'",
                                              line=line)
                elif token.value == ':' and not stack:
                    return pos
            pos += 1
            token = _token_at(tokens, pos)

        raise ExtractionError(f"header of '{function_name}' has no closing ':'", line=line)

    def _skip_group(self, tokens: List[Token], pos: int, line: int) -> int:
        """Skips a bracketed group starting at ``pos``; returns the index after it."""
        stack: List[str] = []
        while pos < len(tokens):
            token = tokens[pos]
            pos += 1
            if token.kind != 'op':
                continue
            if token.value in OPENERS:
                stack.append(token.value)
            elif token.value in CLOSERS:
                if not stack or OPENERS[stack.pop()] != token.value:
                    raise ExtractionError("unbalanced type parameter list", line=line)
                if not stack:
                    return pos
        raise ExtractionError("unterminated type parameter list", line=line)
