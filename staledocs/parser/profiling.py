"""Performance profiling for staledocs runs."""

import cProfile
import pstats
import io
import time
from pathlib import Path
from typing import Callable, Any, Dict, List, Tuple


class ParserProfiler:
    """Wrapper for profiling parser performance"""

    def __init__(self):
        self.profiler = cProfile.Profile()

    def profile_function(self, func: Callable, *args, **kwargs) -> Any:
        """
        Profiles a function call and returns its result.

        Args:
            func: Function to profile
            *args, **kwargs: Arguments to pass to function

        Returns:
            Result of function call
        """
        self.profiler.enable()
        try:
            return func(*args, **kwargs)
        finally:
            self.profiler.disable()

    def format_stats(self, sort_by: str = 'cumtime', top_n: int = 20) -> str:
        """
        Renders profiling statistics as text.

        Args:
            sort_by: Sort key ('cumtime', 'tottime', 'ncalls')
            top_n: Number of top functions to display
        """
        s = io.StringIO()
        ps = pstats.Stats(self.profiler, stream=s).sort_stats(sort_by)
        ps.print_stats(top_n)
        return s.getvalue()


def profile_run(files: List[Path], config, jobs: int = 1) -> Tuple[Any, Dict[str, Any], ParserProfiler]:
    """
    Profiles checking a set of files.

    cProfile only sees the calling thread; a single worker keeps the whole
    run on it.

    Args:
        files: Files to check
        config: CheckConfig of the run
        jobs: Worker count

    Returns:
        Tuple of (RunResult, statistics dict, profiler)
    """
    from ..runner import check_paths

    profiler = ParserProfiler()

    start = time.time()
    result = profiler.profile_function(check_paths, files, config, jobs=jobs)
    elapsed = time.time() - start

    stats = {
        'extractor': config.extractor.value,
        'total_time': elapsed,
        'files_checked': len(result.file_results),
        'diagnostics': len(result.diagnostics),
        'avg_time_per_file': elapsed / len(result.file_results) if result.file_results else 0,
        'files_per_second': len(result.file_results) / elapsed if elapsed > 0 else 0,
    }

    return result, stats, profiler
