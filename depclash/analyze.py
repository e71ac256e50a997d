"""End-to-end analysis: walk, aggregate, detect."""

import logging
from pathlib import Path

from .aggregate import aggregate
from .config import AnalyzerConfig
from .detect import detect
from .models import AnalysisResult
from .walk import walk

logger = logging.getLogger(__name__)


def analyze(
    root: Path | str = ".",
    config: AnalyzerConfig | None = None,
    base_dir: Path | str | None = None,
) -> AnalysisResult:
    """Scan root for manifests and report version conflicts.

    Args:
        root: Directory to scan
        config: Analyzer settings (defaults if omitted)
        base_dir: Directory consumer paths are reported relative to
            (defaults to the current working directory)

    Returns:
        AnalysisResult with the manifests found, the full index and conflicts
    """
    config = config or AnalyzerConfig()
    root = Path(root)

    manifests = walk(
        root,
        exclude_dirs=config.exclude_dirs,
        manifest_name=config.manifest_name,
        follow_symlinks=config.follow_symlinks,
    )
    logger.debug("Found %d manifests under %s", len(manifests), root)

    index = aggregate(manifests, dev_overrides_direct=config.dev_overrides_direct)
    conflicts = detect(index, base_dir=base_dir)

    logger.info(
        "Analyzed %d manifests: %d packages, %d conflicts",
        len(manifests),
        len(index),
        len(conflicts),
    )

    return AnalysisResult(root=root, manifests=manifests, index=index, conflicts=conflicts)
