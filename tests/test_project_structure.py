"""Test that project structure is correct and modules can be imported."""

import depclash.aggregate
import depclash.analyze
import depclash.detect
import depclash.models
import depclash.parse_node
import depclash.render
import depclash.walk
from depclash.models import DependencyRecord, Manifest, ManifestEntry


def test_core_modules_importable():
    """Ensure core modules can be imported."""
    assert hasattr(depclash.models, "ConflictEntry")
    assert hasattr(depclash.models, "DependencyRecord")
    assert hasattr(depclash.walk, "walk")
    assert hasattr(depclash.aggregate, "aggregate")
    assert hasattr(depclash.detect, "detect")
    assert hasattr(depclash.render, "render")
    assert hasattr(depclash.analyze, "analyze")
    assert hasattr(depclash.parse_node, "parse_package_json")


def test_model_creation():
    """Test that basic models can be instantiated."""
    entry = ManifestEntry(name="react", spec="^18.2.0")
    assert entry.name == "react"
    assert entry.section == "dependencies"

    manifest = Manifest(path="package.json", raw="", entries=[entry])
    assert len(manifest.entries) == 1

    record = DependencyRecord(version="^18.2.0")
    assert record.consumers == []
