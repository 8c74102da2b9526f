from collections.abc import Callable, Iterable
from pathlib import Path

from xqueryls.config import DEFAULT_EXCLUDE_DIRS


def find_files(
    directory: Path,
    predicate: Callable[[Path], bool],
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[Path]:
    """
    Finds all files accepted by a predicate in the given directory and its subfolders.

    Args:
        directory: The starting directory for the search.
        predicate: Called with each file path; True keeps the file.
        exclude_dirs: Directory names that are never entered.

    Returns:
        list: A list of Path objects for all matching files.
    """
    excluded = frozenset(exclude_dirs)
    results = []

    def _recurse(path: Path):
        try:
            items = list(path.iterdir())
        except PermissionError:
            return

        for item in items:
            if item.is_dir():
                if item.name not in excluded:
                    _recurse(item)
            elif item.is_file() and predicate(item):
                results.append(item)

    _recurse(directory)
    return results
