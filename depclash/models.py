"""Core data models for depclash."""

from dataclasses import dataclass, field
from pathlib import Path

DEPENDENCIES = "dependencies"
DEV_DEPENDENCIES = "devDependencies"


@dataclass
class ManifestEntry:
    """A single dependency declaration in a package.json."""

    name: str
    spec: str
    section: str = DEPENDENCIES  # dependencies, devDependencies


@dataclass
class Manifest:
    """A parsed package.json manifest."""

    path: Path
    raw: str
    entries: list[ManifestEntry]


@dataclass
class DependencyRecord:
    """One requested version of a package and the manifests requesting it."""

    version: str
    consumers: list[Path] = field(default_factory=list)


# package name -> records in first-seen-version order
DependencyIndex = dict[str, list[DependencyRecord]]


@dataclass(frozen=True)
class VersionUsage:
    """A conflicting version and the (relative) manifest paths using it."""

    version: str
    used_by: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"version": self.version, "usedBy": list(self.used_by)}


@dataclass(frozen=True)
class ConflictEntry:
    """A package requested at two or more distinct version strings."""

    package_name: str
    versions: tuple[VersionUsage, ...]

    def to_dict(self) -> dict:
        return {
            "package": self.package_name,
            "versions": [usage.to_dict() for usage in self.versions],
        }


@dataclass
class AnalysisResult:
    """Everything produced by one analysis run."""

    root: Path
    manifests: list[Path]
    index: DependencyIndex
    conflicts: list[ConflictEntry]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "manifests": [str(path) for path in self.manifests],
            "conflicts": [conflict.to_dict() for conflict in self.conflicts],
        }
