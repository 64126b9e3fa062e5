"""Tests for profiled runs."""

from pathlib import Path

from staledocs.config import CheckConfig
from staledocs.parser.profiling import ParserProfiler, profile_run

FIXTURES = Path(__file__).parent / 'fixtures'


def test_profile_run():
    files = [FIXTURES / 'sample.py', FIXTURES / 'advanced_sample.py']
    result, stats, profiler = profile_run(files, CheckConfig())

    assert not result.success
    assert stats['extractor'] == 'tokenizer'
    assert stats['files_checked'] == 2
    assert stats['diagnostics'] == 3
    assert 'function calls' in profiler.format_stats(top_n=5)


def test_profile_function_returns_result():
    profiler = ParserProfiler()
    assert profiler.profile_function(sorted, [3, 1, 2]) == [1, 2, 3]
