"""Node.js package.json parsing."""

import json
from pathlib import Path

from .errors import ManifestParseError
from .models import DEPENDENCIES, DEV_DEPENDENCIES, Manifest, ManifestEntry


def parse_package_json(content: str, path: Path | str = "package.json") -> Manifest:
    """Parse package.json content into Manifest.

    Only the dependencies and devDependencies sections are read; a missing
    or null section counts as empty.

    Args:
        content: The package.json file content
        path: Where the content came from, used in errors and the result

    Returns:
        Parsed Manifest object

    Raises:
        ManifestParseError: If content is not JSON or a section is malformed
    """
    path = Path(path)
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(document, dict):
        raise ManifestParseError(f"{path} must contain a JSON object", path)

    entries: list[ManifestEntry] = []
    for section in (DEPENDENCIES, DEV_DEPENDENCIES):
        declared = document.get(section)
        if declared is None:
            continue
        if not isinstance(declared, dict):
            raise ManifestParseError(f"'{section}' in {path} must be an object", path)

        for name, spec in declared.items():
            if not isinstance(spec, str):
                raise ManifestParseError(
                    f"Version of '{name}' in {path} {section} must be a string", path
                )
            entries.append(ManifestEntry(name=name, spec=spec, section=section))

    return Manifest(path=path, raw=content, entries=entries)


def merge_declarations(manifest: Manifest, dev_overrides_direct: bool = True) -> dict[str, str]:
    """Collapse a manifest's sections into one name -> version mapping.

    Keys keep first-seen order. When a name appears in both sections the
    devDependencies version wins, unless dev_overrides_direct is False.
    """
    merged: dict[str, str] = {}
    for entry in manifest.entries:
        if entry.name not in merged:
            merged[entry.name] = entry.spec
        elif entry.section == DEV_DEPENDENCIES and dev_overrides_direct:
            merged[entry.name] = entry.spec
    return merged
