"""Discovery of package.json manifests in a directory tree."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .config import DEFAULT_EXCLUDE_DIRS, DEFAULT_MANIFEST_NAME
from .errors import WalkError

logger = logging.getLogger(__name__)


def walk(
    root: Path | str,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
    follow_symlinks: bool = True,
) -> list[Path]:
    """Find every manifest under root, depth-first in pre-order.

    Entries in each directory are visited in sorted name order. Directories
    named in exclude_dirs are not entered. Symlinked directories are entered
    at most once per real path.

    Args:
        root: Directory to scan
        exclude_dirs: Directory names never descended into
        manifest_name: Exact file name to collect
        follow_symlinks: Whether to descend into symlinked directories

    Returns:
        Manifest paths, each joined onto root

    Raises:
        WalkError: If root is missing or any directory cannot be listed
    """
    root = Path(root)
    if not root.is_dir():
        raise WalkError(f"Directory {root} does not exist", root)

    excluded = frozenset(exclude_dirs)
    found: list[Path] = []
    visited: set[str] = set()
    _walk_dir(root, excluded, manifest_name, follow_symlinks, visited, found)
    return found


def _walk_dir(
    directory: Path,
    excluded: frozenset[str],
    manifest_name: str,
    follow_symlinks: bool,
    visited: set[str],
    found: list[Path],
) -> None:
    real = os.path.realpath(directory)
    if real in visited:
        logger.debug("Skipping already visited directory %s", directory)
        return
    visited.add(real)

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(f"Cannot read directory {directory}: {e}", directory) from e

    for entry in entries:
        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=True)
        except OSError:
            is_dir = False

        if is_dir:
            if entry.name in excluded:
                logger.debug("Skipping excluded directory %s", path)
                continue
            if entry.is_symlink() and not follow_symlinks:
                logger.debug("Skipping symlinked directory %s", path)
                continue
            _walk_dir(path, excluded, manifest_name, follow_symlinks, visited, found)
        elif entry.name == manifest_name:
            found.append(path)
