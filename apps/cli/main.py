"""CLI application for depclash."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from depclash.analyze import analyze
from depclash.config import AnalyzerConfig, load_config
from depclash.errors import DepclashError
from depclash.logs import configure_logging
from depclash.models import AnalysisResult
from depclash.render import render, render_manifest_count, render_scan_header

console = Console()

CONFLICTS_EXIT_CODE = 2


def emit(text: str) -> None:
    """Print report text verbatim (no markup, highlighting or wrapping)."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def emit_error(message: str) -> None:
    """Print an error in red, keeping paths intact."""
    console.print(
        f"Error: {message}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def format_json_output(result: AnalysisResult) -> str:
    """Format JSON output."""
    return json.dumps(result.to_dict(), indent=2)


def build_config(
    config_file: Path | None,
    exclude: list[str] | None,
    direct_wins: bool,
    fail_on_conflict: bool,
) -> AnalyzerConfig:
    """Merge the optional config file with command-line overrides."""
    config = load_config(config_file) if config_file else AnalyzerConfig()
    return config.with_overrides(
        exclude_dirs=exclude or None,
        dev_overrides_direct=False if direct_wins else None,
        fail_on_conflict=True if fail_on_conflict else None,
    )


app = typer.Typer(
    name="depclash",
    help="depclash - Find dependencies pinned to different versions across package.json files",
    add_completion=False,
)


@app.command()
def scan(
    root: str = typer.Argument(".", help="Root directory to scan for package.json files"),
    format_type: str = typer.Option("text", "--format", help="Output format: text or json"),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", help="Directory name to skip (repeatable, replaces defaults)"
    ),
    direct_wins: bool = typer.Option(
        False, "--direct-wins", help="Prefer dependencies over devDependencies for the same package"
    ),
    fail_on_conflict: bool = typer.Option(
        False, "--fail-on-conflict", help="Exit with code 2 when conflicts are found"
    ),
    config_file: Path | None = typer.Option(None, "--config", help="JSON configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Report packages requested at different versions across a monorepo."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if format_type not in ("text", "json"):
        emit_error(f"Unsupported format: {format_type}")
        raise typer.Exit(1)

    try:
        config = build_config(config_file, exclude, direct_wins, fail_on_conflict)

        if format_type == "text":
            emit(render_scan_header(root))

        result = analyze(root, config)

        if format_type == "json":
            emit(format_json_output(result))
        else:
            emit(render_manifest_count(len(result.manifests)))
            emit(render(result.conflicts))

        if config.fail_on_conflict and result.has_conflicts:
            raise typer.Exit(CONFLICTS_EXIT_CODE)

    except typer.Exit:
        raise
    except DepclashError as e:
        emit_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        logging.getLogger("depclash").debug("Unexpected failure", exc_info=True)
        emit_error(str(e))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
