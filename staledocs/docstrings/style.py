"""
Docstring style detection and parsing.

Conventions are tried in a fixed order, Google before NumPy, and the first
one whose arguments header is present wins. There is no scoring: the same
docstring always resolves to the same style.
"""

from typing import List, Tuple

from ..config import CheckConfig, StyleMode
from ..exceptions import NoArgsSectionFound
from .data_structures import DocStyle, ParsedDocstring
from .sections import GoogleSectionizer, NumpySectionizer, Sectionizer, split_lines

# Trial order for auto-detection
SECTIONIZERS: List[Tuple[DocStyle, Sectionizer]] = [
    (DocStyle.GOOGLE, GoogleSectionizer()),
    (DocStyle.NUMPY, NumpySectionizer()),
]

MODE_STYLES = {
    StyleMode.AUTO: (DocStyle.GOOGLE, DocStyle.NUMPY),
    StyleMode.GOOGLE: (DocStyle.GOOGLE,),
    StyleMode.NUMPY: (DocStyle.NUMPY,),
}


def candidates(mode: StyleMode) -> List[Tuple[DocStyle, Sectionizer]]:
    """Sectionizers to try for a style mode, in trial order"""
    return [(style, sectionizer) for style, sectionizer in SECTIONIZERS if style in MODE_STYLES[mode]]


def _find_section(lines: List[str], mode: StyleMode) -> Tuple[DocStyle, Sectionizer, int]:
    for style, sectionizer in candidates(mode):
        header = sectionizer.find_header(lines)
        if header is not None:
            return style, sectionizer, header
    raise NoArgsSectionFound(f"no arguments section for docstyle '{mode.value}'")


def detect_style(text: str, mode: StyleMode = StyleMode.AUTO) -> DocStyle:
    """
    Classifies docstring text into a supported convention.

    Args:
        text: Docstring body
        mode: AUTO tries Google then NumPy; GOOGLE / NUMPY try only that style

    Returns:
        The first style whose arguments header is present

    Raises:
        NoArgsSectionFound: If no tried convention has its header in the text
    """
    style, _, _ = _find_section(split_lines(text), mode)
    return style


def parse_docstring(text: str, config: CheckConfig) -> ParsedDocstring:
    """
    Parses the arguments section of a docstring.

    A docstring without an arguments section is not an error: it comes back
    with ``has_args_section=False`` under the forced style, or under the
    first style tried in auto mode.
    """
    lines = split_lines(text)
    try:
        style, sectionizer, header = _find_section(lines, config.docstyle)
    except NoArgsSectionFound:
        return ParsedDocstring(style=MODE_STYLES[config.docstyle][0], has_args_section=False)

    args = sectionizer.extract(lines, header, config.section_end, config.skip_args_and_kwargs)
    return ParsedDocstring(style=style, has_args_section=True, args=tuple(args))
