"""Analyzer configuration."""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .errors import ConfigError

DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git")
DEFAULT_MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings for one analysis run."""

    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    manifest_name: str = DEFAULT_MANIFEST_NAME
    # When a package is in both sections, devDependencies wins.
    dev_overrides_direct: bool = True
    follow_symlinks: bool = True
    fail_on_conflict: bool = False

    def with_overrides(self, **overrides) -> "AnalyzerConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "exclude_dirs" in changes:
            changes["exclude_dirs"] = tuple(changes["exclude_dirs"])
        return replace(self, **changes)


_FIELD_TYPES = {
    "exclude_dirs": list,
    "manifest_name": str,
    "dev_overrides_direct": bool,
    "follow_symlinks": bool,
    "fail_on_conflict": bool,
}


def load_config(path: Path | str) -> AnalyzerConfig:
    """Load an AnalyzerConfig from a JSON file.

    Args:
        path: Path to a JSON object whose keys are AnalyzerConfig fields

    Returns:
        Config with defaults for any field the file omits

    Raises:
        ConfigError: If the file is missing, not JSON, or has bad keys/types
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object", path)

    known = {f.name for f in fields(AnalyzerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown config keys in {path}: {', '.join(unknown)}", path
        )

    for key, value in data.items():
        expected = _FIELD_TYPES[key]
        if not isinstance(value, expected):
            raise ConfigError(
                f"Config key '{key}' in {path} must be of type {expected.__name__}",
                path,
            )

    if "exclude_dirs" in data:
        if not all(isinstance(name, str) for name in data["exclude_dirs"]):
            raise ConfigError(
                f"Config key 'exclude_dirs' in {path} must list strings", path
            )
        data["exclude_dirs"] = tuple(data["exclude_dirs"])

    return AnalyzerConfig(**data)
