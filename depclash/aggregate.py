"""Aggregation of manifest declarations into a dependency index."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import ManifestReadError
from .models import DependencyIndex, DependencyRecord, Manifest
from .parse_node import merge_declarations, parse_package_json

logger = logging.getLogger(__name__)


def read_manifest(path: Path | str) -> Manifest:
    """Read and parse one package.json from disk."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Cannot read manifest {path}: {e}", path) from e
    return parse_package_json(content, path)


def aggregate(paths: Iterable[Path | str], dev_overrides_direct: bool = True) -> DependencyIndex:
    """Build a DependencyIndex from manifest files, in the given order.

    The first unreadable or malformed manifest aborts the whole run.

    Raises:
        ManifestReadError: If a manifest cannot be read
        ManifestParseError: If a manifest is not a valid package.json
    """
    return aggregate_manifests(
        (read_manifest(path) for path in paths),
        dev_overrides_direct=dev_overrides_direct,
    )


def aggregate_manifests(
    manifests: Iterable[Manifest], dev_overrides_direct: bool = True
) -> DependencyIndex:
    """Build a DependencyIndex from already-parsed manifests.

    Versions are grouped by exact string equality, so "^1.0.0" and "1.0.0"
    are different records.
    """
    index: DependencyIndex = {}

    for manifest in manifests:
        declared = merge_declarations(manifest, dev_overrides_direct)
        logger.debug("%s declares %d dependencies", manifest.path, len(declared))

        for name, version in declared.items():
            records = index.setdefault(name, [])
            for record in records:
                if record.version == version:
                    record.consumers.append(manifest.path)
                    break
            else:
                records.append(DependencyRecord(version=version, consumers=[manifest.path]))

    return index
