"""Conflict detection over a dependency index."""

import os
from pathlib import Path

from .models import ConflictEntry, DependencyIndex, VersionUsage


def detect(
    index: DependencyIndex,
    base_dir: Path | str | None = None,
    relativize: bool = True,
) -> list[ConflictEntry]:
    """Find packages requested at more than one version string.

    Args:
        index: Aggregated dependency index
        base_dir: Directory consumer paths are made relative to
            (defaults to the current working directory)
        relativize: Keep consumer paths verbatim when False

    Returns:
        One ConflictEntry per conflicting package, in index order
    """
    if relativize:
        start = os.fspath(base_dir) if base_dir is not None else os.getcwd()

    conflicts = []
    for name, records in index.items():
        if len(records) < 2:
            continue

        versions = []
        for record in records:
            if relativize:
                used_by = tuple(os.path.relpath(path, start) for path in record.consumers)
            else:
                used_by = tuple(str(path) for path in record.consumers)
            versions.append(VersionUsage(version=record.version, used_by=used_by))

        conflicts.append(ConflictEntry(package_name=name, versions=tuple(versions)))

    return conflicts
