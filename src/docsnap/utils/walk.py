"""Filesystem tree walking."""

import os
from pathlib import Path
from typing import Callable, Iterator

PathPredicate = Callable[[Path], bool]


def walk_files(root: Path | str, include: PathPredicate) -> Iterator[Path]:
    """Yield every file under ``root`` accepted by ``include``.

    Descends into all subdirectories regardless of depth. Each call walks
    the tree again; nothing is cached between calls. Order within a
    directory follows the filesystem and should not be relied on.

    Args:
        root: Directory to walk
        include: Called with each file path; the file is yielded if it returns True

    Yields:
        Paths of the accepted files, rooted at ``root``
    """
    # os.walk swallows listing errors unless told otherwise
    def _raise(error: OSError) -> None:
        raise error

    for dirpath, _, filenames in os.walk(root, onerror=_raise):
        for filename in filenames:
            full_path = Path(dirpath) / filename
            if include(full_path):
                yield full_path


def has_extension(extension: str) -> PathPredicate:
    """Build a predicate matching regular files with the given suffix."""

    def _predicate(path: Path) -> bool:
        return path.name.endswith(extension) and path.is_file()

    return _predicate
