"""Directory walking and file discovery for the staledocs parser."""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional
import logging

from .language_config import is_supported

logger = logging.getLogger(__name__)


def is_hidden(file_path: Path, root: Path) -> bool:
    """True if any component of the path below ``root`` starts with a dot"""
    return any(part.startswith('.') for part in file_path.relative_to(root).parts)


def walk_directory(root: Path, glob: Optional[str] = None, allow_hidden: bool = False) -> Iterator[Path]:
    """
    Recursively yields the supported source files under a directory.

    Args:
        root: Directory to traverse
        glob: Optional pattern, relative to ``root``, restricting the files
        allow_hidden: Whether dot-prefixed files and directories are included

    Yields:
        Paths of matching files

    Raises:
        ValueError: If the glob pattern is invalid
    """
    try:
        candidates = list(root.glob(glob)) if glob is not None else list(root.rglob('*'))
    except (ValueError, NotImplementedError) as e:
        raise ValueError(f"Invalid glob pattern {glob!r}: {e}") from e

    for file_path in candidates:
        if not file_path.is_file() or not is_supported(file_path.suffix):
            continue
        if not allow_hidden and is_hidden(file_path, root):
            continue
        yield file_path


def discover_files(paths: Iterable[Path], glob: Optional[str] = None,
                   allow_hidden: bool = False) -> List[Path]:
    """
    Expands files and directories into the sorted list of files to check.

    Files given explicitly are always kept; directories are traversed.

    Args:
        paths: Files and directories from the command line
        glob: Pattern restricting directory traversal
        allow_hidden: Whether hidden paths found during traversal are included

    Returns:
        Sorted, de-duplicated list of files
    """
    found = set()

    for path in paths:
        path = Path(path)
        if path.is_dir():
            found.update(walk_directory(path, glob=glob, allow_hidden=allow_hidden))
        else:
            found.add(path)

    files = sorted(found)
    logger.debug("Discovered %d file(s)", len(files))
    return files
