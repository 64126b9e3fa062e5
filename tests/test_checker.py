"""Tests for the signature/docstring consistency checks."""

import pytest

from staledocs.config import CheckConfig
from staledocs.docstrings import DocArgEntry, DocStyle, ParsedDocstring
from staledocs.parser import FunctionSignature, Parameter
from staledocs.rules import DiagnosticKind, check_function
from staledocs.rules.checker import normalize_type, sequences_match


def signature(*params, name='f', line=1):
    return FunctionSignature(
        function_name=name,
        definition_line=line,
        parameters=tuple(Parameter(n, t, i) for i, (n, t) in enumerate(params)),
    )


def documented(*args, style=DocStyle.GOOGLE):
    return ParsedDocstring(
        style=style,
        has_args_section=True,
        args=tuple(DocArgEntry(n, t, i) for i, (n, t) in enumerate(args)),
    )


NO_SECTION = ParsedDocstring(style=DocStyle.GOOGLE, has_args_section=False)


def kinds(diagnostics):
    return [d.kind for d in diagnostics]


class TestMissingDocstring:
    def test_tolerated_by_default(self):
        assert check_function(signature(('x', None)), None, CheckConfig(), 'a.py') == []

    def test_forbidden(self):
        diagnostics = check_function(signature(('x', None), name='g', line=7), None,
                                     CheckConfig(forbid_no_docstring=True), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.MISSING_DOCSTRING]
        assert diagnostics[0].format() == 'a.py: Line 7: `g`: Docstring missing.'

    def test_forbidden_without_parameters(self):
        diagnostics = check_function(signature(), None, CheckConfig(forbid_no_docstring=True), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.MISSING_DOCSTRING]


class TestMissingArgsSection:
    def test_no_parameters_no_section(self):
        assert check_function(signature(), NO_SECTION, CheckConfig(), 'a.py') == []
        assert check_function(signature(), NO_SECTION,
                              CheckConfig(forbid_no_args_in_docstring=True), 'a.py') == []

    def test_tolerated_by_default(self):
        assert check_function(signature(('x', 'int')), NO_SECTION, CheckConfig(), 'a.py') == []

    def test_forbidden(self):
        diagnostics = check_function(signature(('x', 'int')), NO_SECTION,
                                     CheckConfig(forbid_no_args_in_docstring=True), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.MISSING_ARGS_SECTION]
        assert diagnostics[0].message == '`f`: Args missing from docstring.'


class TestArgumentMismatch:
    def test_exact_match(self):
        pairs = [('x', 'int'), ('reverse', 'bool')]
        config = CheckConfig(forbid_untyped_docstrings=True)
        assert check_function(signature(*pairs), documented(*pairs), config, 'a.py') == []

    def test_missing_argument(self):
        diagnostics = check_function(signature(('x', None), ('reverse', None), line=3),
                                     documented(('x', None)), CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]
        assert diagnostics[0].format() == (
            "a.py: Line 3: Args from function: [('x', None), ('reverse', None)]. "
            "Args from docstring: [('x', None)]."
        )

    def test_reordered(self):
        diagnostics = check_function(signature(('x', 'int'), ('y', 'str')),
                                     documented(('y', 'str'), ('x', 'int')), CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]

    def test_extra_documented_argument(self):
        diagnostics = check_function(signature(('x', None)),
                                     documented(('x', None), ('gone', None)), CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]

    def test_type_differs(self):
        diagnostics = check_function(signature(('x', 'int')), documented(('x', 'str')),
                                     CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]

    def test_documented_type_without_annotation(self):
        diagnostics = check_function(signature(('x', None)), documented(('x', 'int')),
                                     CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]

    def test_empty_section_with_parameters(self):
        diagnostics = check_function(signature(('x', None)), documented(), CheckConfig(), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH]

    def test_rerun_is_identical(self):
        sig = signature(('x', 'int'), ('y', None))
        parsed = documented(('y', None))
        first = check_function(sig, parsed, CheckConfig(), 'a.py')
        assert check_function(sig, parsed, CheckConfig(), 'a.py') == first


class TestUntypedDocArgs:
    SIGNATURE = signature(('x', 'int'), ('reverse', 'bool'))
    PARSED = documented(('x', 'int'), ('reverse', None))

    def test_tolerated_by_default(self):
        assert check_function(self.SIGNATURE, self.PARSED, CheckConfig(), 'a.py') == []

    def test_forbidden(self):
        diagnostics = check_function(self.SIGNATURE, self.PARSED,
                                     CheckConfig(forbid_untyped_docstrings=True), 'a.py')
        untyped = [d for d in diagnostics if d.kind is DiagnosticKind.UNTYPED_DOC_ARG]
        assert len(untyped) == 1
        assert untyped[0].message == '`f`: Docstring argument `reverse` has no type.'
        # Without tolerance the sequences differ too
        assert DiagnosticKind.ARGUMENT_MISMATCH in kinds(diagnostics)

    def test_untyped_on_both_sides(self):
        diagnostics = check_function(signature(('x', None)), documented(('x', None)),
                                     CheckConfig(forbid_untyped_docstrings=True), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.UNTYPED_DOC_ARG]

    def test_cofires_with_mismatch(self):
        diagnostics = check_function(signature(('x', None), ('y', None)), documented(('x', None)),
                                     CheckConfig(forbid_untyped_docstrings=True), 'a.py')
        assert kinds(diagnostics) == [DiagnosticKind.ARGUMENT_MISMATCH, DiagnosticKind.UNTYPED_DOC_ARG]


class TestHelpers:
    @pytest.mark.parametrize('annotation, normalized', [
        ('int', 'int'),
        ('Dict[str,\n        int]', 'Dict[str, int]'),
        (None, None),
    ])
    def test_normalize_type(self, annotation, normalized):
        assert normalize_type(annotation) == normalized

    def test_sequences_match(self):
        assert sequences_match([('x', 'int')], [('x', None)], tolerate_untyped=True)
        assert not sequences_match([('x', 'int')], [('x', None)], tolerate_untyped=False)
        assert not sequences_match([('x', None)], [('y', None)], tolerate_untyped=True)
        assert sequences_match([], [], tolerate_untyped=False)
