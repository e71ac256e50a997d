"""Exceptions raised while scanning a tree for manifests."""

from pathlib import Path


class DepclashError(Exception):
    """Base class for all depclash failures."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class WalkError(DepclashError):
    """The scan root or a directory below it could not be listed."""


class ManifestReadError(DepclashError):
    """A manifest file could not be read."""


class ManifestParseError(DepclashError):
    """A manifest is not valid JSON or does not have the expected shape."""


class ConfigError(DepclashError):
    """A configuration file is missing or invalid."""
