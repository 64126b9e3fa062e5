"""Main CLI entry point for staledocs."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console

from .. import __version__
from ..config import CheckConfig, ExtractorKind, SectionEnd, StyleMode
from ..parser import discover_files
from ..parser.profiling import profile_run
from ..runner import check_paths
from .reporting import report_profile, report_run, setup_logging


@click.command()
@click.argument('paths', nargs=-1, required=True,
                type=click.Path(exists=True, path_type=Path))
@click.option('--allow-hidden', '--ah', is_flag=True,
              help='Include dot-prefixed files and directories when traversing')
@click.option('--break-on-empty-line', '--be', is_flag=True,
              help='End the arguments section at the first empty line')
@click.option('--forbid-no-docstring', '--nd', is_flag=True,
              help='Report functions without a docstring')
@click.option('--forbid-no-args-in-docstring', '--na', is_flag=True,
              help='Report docstrings without an arguments section')
@click.option('--forbid-untyped-docstrings', '--nu', is_flag=True,
              help='Report documented arguments without a type')
@click.option('--skip-args-and-kwargs', '--sk', is_flag=True,
              help='Ignore *args and **kwargs on both sides')
@click.option('--glob', '-g', default=None,
              help='Only check files matching this pattern (directories only)')
@click.option('--docstyle', '-s', default='auto', show_default=True,
              type=click.Choice([mode.value for mode in StyleMode], case_sensitive=False),
              help='Docstring convention, or auto-detection')
@click.option('--extractor', '-e', default='tokenizer', show_default=True,
              type=click.Choice([kind.value for kind in ExtractorKind], case_sensitive=False),
              help='Signature extraction strategy')
@click.option('--no-fallback', is_flag=True,
              help='Do not retry with the grammar parser when the tokenizer fails')
@click.option('--jobs', '-j', default=None, type=click.IntRange(min=1),
              help='Number of worker threads (default: CPU count)')
@click.option('--profile', is_flag=True, help='Profile the run and print timing statistics')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__)
def cli(paths: Tuple[Path, ...], allow_hidden: bool, break_on_empty_line: bool,
        forbid_no_docstring: bool, forbid_no_args_in_docstring: bool,
        forbid_untyped_docstrings: bool, skip_args_and_kwargs: bool, glob: Optional[str],
        docstyle: str, extractor: str, no_fallback: bool, jobs: Optional[int],
        profile: bool, verbose: bool):
    """
    Check Python files for stale docstrings.

    Compares each function's parameters with the arguments documented in its
    docstring and reports every mismatch.

    Examples:
        staledocs src/
        staledocs src/ --glob "**/*.py" --docstyle numpy
        staledocs module.py --forbid-untyped-docstrings
    """
    console = Console()
    setup_logging(console, verbose)

    if glob is not None and not all(path.is_dir() for path in paths):
        raise click.BadParameter("can only be used when every path is a directory",
                                 param_hint="'--glob'")

    try:
        files = discover_files(paths, glob=glob, allow_hidden=allow_hidden)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--glob'")

    config = CheckConfig(
        docstyle=StyleMode(docstyle.lower()),
        section_end=SectionEnd.EMPTY_LINE if break_on_empty_line else SectionEnd.NEXT_HEADER,
        forbid_no_docstring=forbid_no_docstring,
        forbid_no_args_in_docstring=forbid_no_args_in_docstring,
        forbid_untyped_docstrings=forbid_untyped_docstrings,
        skip_args_and_kwargs=skip_args_and_kwargs,
        extractor=ExtractorKind(extractor.lower()),
        fallback=not no_fallback,
    )

    if profile:
        result, stats, profiler = profile_run(files, config, jobs=jobs or 1)
        report_profile(console, stats, profiler.format_stats(top_n=15))
    else:
        result = check_paths(files, config, jobs=jobs)

    report_run(console, result)

    if not result.success:
        sys.exit(1)


if __name__ == '__main__':
    cli()
