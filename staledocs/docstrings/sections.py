"""
Sectionizers for the supported docstring conventions.

Each sectionizer finds its convention's arguments header in a docstring
and lists the documented arguments in the order they appear. Lines that
do not look like an entry are skipped; they never abort the section.
"""

import inspect
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from ..config import SectionEnd
from .data_structures import DocArgEntry, DocStyle

GOOGLE_HEADERS = ('Args:', 'Arguments:', 'Parameters:')
NUMPY_HEADERS = ('Parameters',)

# "Returns:", "Keyword Args:", "See Also:"
GOOGLE_SECTION_RE = re.compile(r'^[A-Z][A-Za-z ]*:$')
# "name (type): description" or "name: description"
GOOGLE_ENTRY_RE = re.compile(r'^(?P<name>\*{0,2}[A-Za-z_]\w*)\s*(?:\((?P<type>.*?)\))?\s*:')
NUMPY_NAME_RE = re.compile(r'^\*{0,2}[A-Za-z_]\w*$')
UNDERLINE_RE = re.compile(r'^-{3,}$')
TYPE_SUFFIX_RE = re.compile(r',\s*(?:optional|default\b.*)$')


def split_lines(text: str) -> List[str]:
    """Dedents docstring text the way Python tooling does and splits it into lines"""
    return inspect.cleandoc(text).splitlines()


def indentation(line: str) -> int:
    return len(line) - len(line.lstrip())


def clean_type(text: Optional[str]) -> Optional[str]:
    """Strips ", optional" / ", default ..." from a documented type; empty becomes None"""
    if text is None:
        return None
    cleaned = TYPE_SUFFIX_RE.sub('', text.strip()).strip()
    return cleaned or None


class Sectionizer(ABC):
    """Finds and reads the arguments section of one docstring convention."""

    style: DocStyle

    @abstractmethod
    def find_header(self, lines: List[str]) -> Optional[int]:
        """Index of the arguments header line, or None if the section is absent"""
        ...

    @abstractmethod
    def extract(self, lines: List[str], header: int, section_end: SectionEnd,
                skip_args_and_kwargs: bool = False) -> List[DocArgEntry]:
        """
        Lists the documented arguments of the section starting at ``header``.

        Args:
            lines: Dedented docstring lines
            header: Index returned by find_header
            section_end: Termination policy of the section
            skip_args_and_kwargs: Drop ``*args`` / ``**kwargs`` entries

        Returns:
            Entries in textual order, positions assigned
        """
        ...

    @staticmethod
    def _number(entries: List[DocArgEntry], skip_args_and_kwargs: bool) -> List[DocArgEntry]:
        if skip_args_and_kwargs:
            entries = [e for e in entries if not e.name.startswith('*')]
        return [
            DocArgEntry(name=e.name, type_annotation=e.type_annotation, position=i)
            for i, e in enumerate(entries)
        ]


class GoogleSectionizer(Sectionizer):
    """
    Google convention::

        Args:
            x (int): Description.
            y: Description,
                continued on an indented line.
    """

    style = DocStyle.GOOGLE

    def find_header(self, lines: List[str]) -> Optional[int]:
        for i, line in enumerate(lines):
            if line.strip() in GOOGLE_HEADERS:
                return i
        return None

    def extract(self, lines: List[str], header: int, section_end: SectionEnd,
                skip_args_and_kwargs: bool = False) -> List[DocArgEntry]:
        # A header on the quote line has no indentation to compare against;
        # the first entry below it sets the level instead
        header_indent = indentation(lines[header]) if header > 0 else None
        entry_indent = None
        seen_content = False
        entries = []

        for line in lines[header + 1:]:
            stripped = line.strip()
            if not stripped:
                if section_end is SectionEnd.EMPTY_LINE and seen_content:
                    break
                continue

            indent = indentation(line)
            if header_indent is None:
                if GOOGLE_SECTION_RE.match(stripped):
                    break
                header_indent = indent - 1
            if indent <= header_indent:
                if GOOGLE_SECTION_RE.match(stripped):
                    break
                # Dedented prose is not an entry
                seen_content = True
                continue

            seen_content = True
            if entry_indent is None:
                entry_indent = indent
            if indent != entry_indent:
                # continuation line
                continue

            match = GOOGLE_ENTRY_RE.match(stripped)
            if match is None:
                continue
            entries.append(DocArgEntry(name=match.group('name'),
                                       type_annotation=clean_type(match.group('type'))))

        return self._number(entries, skip_args_and_kwargs)


class NumpySectionizer(Sectionizer):
    """
    NumPy convention::

        Parameters
        ----------
        x : int
            Description.
        y
            Description.
    """

    style = DocStyle.NUMPY

    def find_header(self, lines: List[str]) -> Optional[int]:
        for i, line in enumerate(lines[:-1]):
            if line.strip() in NUMPY_HEADERS and UNDERLINE_RE.match(lines[i + 1].strip()):
                return i
        return None

    def extract(self, lines: List[str], header: int, section_end: SectionEnd,
                skip_args_and_kwargs: bool = False) -> List[DocArgEntry]:
        header_indent = indentation(lines[header])
        body = lines[header + 2:]
        entry_indent = None
        seen_content = False
        entries: List[DocArgEntry] = []

        for i, line in enumerate(body):
            stripped = line.strip()
            if not stripped:
                if section_end is SectionEnd.EMPTY_LINE and seen_content:
                    break
                continue

            following = body[i + 1].strip() if i + 1 < len(body) else ''
            if indentation(line) <= header_indent and UNDERLINE_RE.match(following):
                # next underlined section, e.g. "Returns"
                break

            seen_content = True
            indent = indentation(line)
            if entry_indent is None:
                entry_indent = indent
            if indent != entry_indent:
                continue

            entries.extend(self._parse_entry(stripped))

        return self._number(entries, skip_args_and_kwargs)

    @staticmethod
    def _parse_entry(stripped: str) -> List[DocArgEntry]:
        """``x : int``, ``x`` or ``x, y : int``; malformed lines give no entries"""
        names_text, colon, type_text = stripped.partition(':')
        names = [name.strip() for name in names_text.split(',')]
        if not all(NUMPY_NAME_RE.match(name) for name in names):
            return []

        annotation = clean_type(type_text) if colon else None
        return [DocArgEntry(name=name, type_annotation=annotation) for name in names]
