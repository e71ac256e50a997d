"""Pytest configuration and fixtures."""

import json

import pytest


def write_manifest(directory, dependencies=None, dev_dependencies=None, name=None):
    """Write a package.json into directory and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    document = {"name": name or directory.name, "version": "1.0.0"}
    if dependencies is not None:
        document["dependencies"] = dependencies
    if dev_dependencies is not None:
        document["devDependencies"] = dev_dependencies
    manifest = directory / "package.json"
    manifest.write_text(json.dumps(document))
    return manifest


@pytest.fixture
def make_manifest():
    """Factory fixture writing package.json files."""
    return write_manifest


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "dependencies": {
    "express": "^4.18.0",
    "lodash": "~4.17.21"
  },
  "devDependencies": {
    "jest": "^29.0.0"
  }
}
"""


@pytest.fixture
def conflicting_tree(tmp_path):
    """Two workspaces pinning left-pad differently, plus a vendored copy."""
    write_manifest(tmp_path / "pkgA", {"left-pad": "1.0.0"})
    write_manifest(tmp_path / "pkgB", {"left-pad": "1.3.0"})
    write_manifest(tmp_path / "pkgB" / "node_modules" / "left-pad", {"left-pad": "9.9.9"})
    return tmp_path
