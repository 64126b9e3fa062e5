"""
Per-file pipeline and parallel run.

Each file is read once, its functions are extracted and checked one after
the other, and the file's diagnostics are grouped into a FileResult. Files
are independent units of work spread over a thread pool; a failure in one
file is reported for that file only.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional

from .config import CheckConfig, ExtractorKind
from .docstrings import parse_docstring
from .exceptions import ExtractionError
from .parser import ExtractedFunction, get_extractor
from .rules import (
    Diagnostic,
    DiagnosticKind,
    FileResult,
    ResultCollector,
    RunResult,
    check_function,
    make_file_result,
)

logger = logging.getLogger(__name__)


def parse_failure(file_path: str, message: str, line: Optional[int] = None) -> FileResult:
    """A FileResult holding the single diagnostic of a file that could not be analyzed"""
    diagnostic = Diagnostic(
        kind=DiagnosticKind.PARSE_FAILURE,
        file=file_path,
        line=line or 1,
        message=f"Could not parse file: {message}",
    )
    return make_file_result(file_path, [diagnostic])


def extract_functions(source: str, file_path: str, config: CheckConfig) -> List[ExtractedFunction]:
    """
    Extracts a file's functions with the configured strategy.

    When the tokenizer gives up and fallback is enabled, the whole file is
    extracted again with the grammar parser.

    Raises:
        ExtractionError: If no allowed strategy can extract the file
    """
    extractor = get_extractor(config.extractor, config.skip_args_and_kwargs)
    try:
        return extractor.extract_file(source)
    except ExtractionError as e:
        if not (config.fallback and extractor.kind is ExtractorKind.TOKENIZER):
            raise
        logger.debug("%s: tokenizer failed (%s), falling back to grammar parser", file_path, e)

    return get_extractor(ExtractorKind.GRAMMAR, config.skip_args_and_kwargs).extract_file(source)


def check_source(source: str, file_path: str, config: CheckConfig) -> FileResult:
    """
    Checks every function of one file's source text.

    Args:
        source: Full text of the file
        file_path: Path reported in diagnostics
        config: Run configuration

    Returns:
        FileResult with diagnostics ordered by line
    """
    try:
        functions = extract_functions(source, file_path, config)
    except ExtractionError as e:
        logger.debug("%s: extraction failed: %s", file_path, e)
        return parse_failure(file_path, str(e), e.line)

    diagnostics: List[Diagnostic] = []
    for function in functions:
        parsed = None
        if function.docstring is not None:
            parsed = parse_docstring(function.docstring.text, config)
        diagnostics.extend(check_function(function.signature, parsed, config, file_path))

    return make_file_result(file_path, diagnostics)


def check_file(path: Path, config: CheckConfig) -> FileResult:
    """Reads a whole file, then checks it; unreadable files become a ParseFailure"""
    file_path = str(path)
    try:
        with open(path, 'rb') as f:
            code_bytes = f.read()
        source = code_bytes.decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("%s: could not read file: %s", file_path, e)
        return parse_failure(file_path, str(e))

    return check_source(source, file_path, config)


def check_paths(files: Iterable[Path], config: CheckConfig, jobs: Optional[int] = None) -> RunResult:
    """
    Checks files in parallel and aggregates the results.

    Args:
        files: Files to check
        config: Run configuration
        jobs: Worker count; defaults to the number of CPUs

    Returns:
        RunResult with file results sorted by path
    """
    files = list(files)
    collector = ResultCollector()
    workers = max(1, jobs or os.cpu_count() or 1)

    if workers == 1:
        # stay on the calling thread
        for path in files:
            collector.add(check_file(path, config))
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(check_file, path, config) for path in files]
            for future in as_completed(futures):
                collector.add(future.result())

    logger.debug("Checked %d file(s) with %d worker(s)", len(collector), workers)
    return collector.result()
