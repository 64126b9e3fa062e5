"""Tests for the per-file pipeline and the parallel run."""

from pathlib import Path

import pytest

from staledocs.config import CheckConfig, ExtractorKind
from staledocs.rules import DiagnosticKind
from staledocs.runner import check_file, check_paths, check_source

FIXTURES = Path(__file__).parent / 'fixtures'

LAMBDA_DEFAULT = '''
def pick(items, key=lambda item: item[0]):
    """Pick one.

    Args:
        items: Things.
        key: Sort key.
    """
'''

CLEAN_AND_STALE = '''
def clean(x: int):
    """Clean.

    Args:
        x (int): A value.
    """


def stale(x: int, y: int):
    """Stale.

    Args:
        x (int): A value.
    """
'''

HEADER_ON_QUOTE_LINE = 'def f(x, y):\n    """Args:\n        x: X.\n        y: Y.\n    """\n'

DEEP_EXPRESSION = 'x = ' + ' + '.join(['1'] * 3000) + '\n\n\ndef f(y):\n    """Args:\n        x: Wrong.\n    """\n'


@pytest.fixture(params=[ExtractorKind.TOKENIZER, ExtractorKind.GRAMMAR], ids=lambda k: k.value)
def config(request):
    return CheckConfig(extractor=request.param)


class TestFixtures:
    def test_clean_sample(self, config):
        result = check_file(FIXTURES / 'sample.py', config)
        assert result.diagnostics == ()

    def test_stale_sample(self, config):
        result = check_file(FIXTURES / 'advanced_sample.py', config)
        assert [d.line for d in result.diagnostics] == [9, 20, 33]
        assert {d.kind for d in result.diagnostics} == {DiagnosticKind.ARGUMENT_MISMATCH}
        assert result.diagnostics[0].message == (
            "Args from function: [('name', 'str'), ('age', 'int'), ('breed', 'str')]. "
            "Args from docstring: [('name', 'str'), ('breed', 'str')]."
        )

    def test_forbid_no_docstring(self, config):
        strict = CheckConfig(extractor=config.extractor, forbid_no_docstring=True)
        result = check_file(FIXTURES / 'sample.py', strict)
        assert [d.line for d in result.diagnostics] == [20]
        assert result.diagnostics[0].message == '`calculate_sum`: Docstring missing.'


class TestCheckSource:
    def test_one_clean_one_stale(self, config):
        result = check_source(CLEAN_AND_STALE, 'mod.py', config)
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].line == 10

    def test_fallback_to_grammar(self):
        result = check_source(LAMBDA_DEFAULT, 'mod.py', CheckConfig())
        assert result.diagnostics == ()

    def test_no_fallback(self):
        result = check_source(LAMBDA_DEFAULT, 'mod.py', CheckConfig(fallback=False))
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.PARSE_FAILURE]
        assert result.diagnostics[0].message.startswith('Could not parse file:')
        assert result.diagnostics[0].line == 2

    def test_syntax_error(self, config):
        result = check_source('def broken(x:\n    pass\n', 'mod.py', config)
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.PARSE_FAILURE]

    def test_empty_source(self, config):
        assert check_source('', 'mod.py', config).diagnostics == ()

    def test_header_on_quote_line(self, config):
        result = check_source(HEADER_ON_QUOTE_LINE, 'mod.py', config)
        assert result.diagnostics == ()


class TestCheckPaths:
    def test_deep_expression_does_not_stop_the_run(self, tmp_path):
        (tmp_path / 'deep.py').write_text(DEEP_EXPRESSION)
        (tmp_path / 'ok.py').write_text(CLEAN_AND_STALE)

        result = check_paths([tmp_path / 'deep.py', tmp_path / 'ok.py'],
                             CheckConfig(extractor=ExtractorKind.GRAMMAR), jobs=2)

        deep, ok = result.file_results
        assert [d.kind for d in deep.diagnostics] == [DiagnosticKind.ARGUMENT_MISMATCH]
        assert [d.line for d in ok.diagnostics] == [10]

    def test_sorted_by_path(self, tmp_path):
        (tmp_path / 'b.py').write_text(CLEAN_AND_STALE)
        (tmp_path / 'a.py').write_text('def f():\n    """Nothing."""\n')
        (tmp_path / 'c.py').write_text('def g(x):\n    pass\n')

        result = check_paths(sorted(tmp_path.glob('*.py'), reverse=True), CheckConfig(), jobs=3)

        assert [Path(r.file).name for r in result.file_results] == ['a.py', 'b.py', 'c.py']
        assert not result.success
        assert result.files_with_errors == 1

    def test_failure_stays_local(self, tmp_path):
        (tmp_path / 'bad.py').write_bytes(b'def f(x):\n    """\xff"""\n')
        (tmp_path / 'good.py').write_text('def f(x):\n    """Fine."""\n')

        result = check_paths([tmp_path / 'bad.py', tmp_path / 'good.py'], CheckConfig())

        bad, good = result.file_results
        assert [d.kind for d in bad.diagnostics] == [DiagnosticKind.PARSE_FAILURE]
        assert bad.diagnostics[0].line == 1
        assert good.diagnostics == ()

    def test_missing_file(self, tmp_path):
        result = check_paths([tmp_path / 'gone.py'], CheckConfig(), jobs=1)
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.PARSE_FAILURE]

    def test_no_files(self):
        result = check_paths([], CheckConfig())
        assert result.success
        assert result.file_results == ()
