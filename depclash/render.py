"""Human-readable conflict report."""

from pathlib import Path

from .models import ConflictEntry

RECOMMENDATIONS = (
    "Review each conflict and decide on a target version",
    "Update packages to use consistent versions",
    "Consider using pnpm overrides or npm resolutions",
    "Test thoroughly after version updates",
)


def render_scan_header(root: Path | str) -> str:
    """Line announcing which directory is being scanned."""
    return f"\n🔍 Analyzing dependencies in: {Path(root).resolve()}"


def render_manifest_count(manifest_count: int) -> str:
    return f"   Found {manifest_count} package.json files"


def render(conflicts: list[ConflictEntry]) -> str:
    """Format conflicts as a plain-text report."""
    lines = ["", "📊 Dependency Analysis Report", "", "=" * 60]

    if not conflicts:
        lines += ["", "✅ No version conflicts found!", ""]
        return "\n".join(lines)

    lines += ["", f"⚠️  Found {len(conflicts)} packages with version conflicts:", ""]

    for conflict in conflicts:
        lines += ["", f"📦 {conflict.package_name}", "-" * 40]
        for usage in conflict.versions:
            lines.append(f"  Version: {usage.version}")
            lines.append("  Used by:")
            lines.extend(f"    - {path}" for path in usage.used_by)

    lines += ["", "=" * 60, "", "💡 Recommendations:"]
    lines.extend(f"  {number}. {text}" for number, text in enumerate(RECOMMENDATIONS, 1))
    lines.append("")

    return "\n".join(lines)
