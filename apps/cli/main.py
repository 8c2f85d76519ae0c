"""CLI application for single-host conversion."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from core.convert import run_conversion
from core.errors import InvalidArgumentError
from core.manifest_identity import DEFAULT_MANIFEST_TOOL
from core.models import HOSTS, ConversionOptions, StageResult

console = Console()
err_console = Console(stderr=True)


def report_results(results: list[StageResult], quiet: bool = False) -> int:
    """Print stage notes and errors.

    Returns:
        Process exit code: 1 if any stage failed, otherwise 0
    """
    exit_code = 0
    for result in results:
        for note in result.notes:
            if note.startswith("Warning:"):
                err_console.print(note, style="yellow", markup=False)
            elif not quiet:
                console.print(note, markup=False)

        if not result.ok:
            err_console.print(f"Error {result.name}: {result.error}", style="red", markup=False)
            exit_code = 1

    return exit_code


app = typer.Typer(
    name="singlehost",
    help="Convert a multi-host Office add-in template to a single host and manifest format",
    add_completion=False,
)

@app.command()
def convert(
    host: str | None = typer.Argument(None, help=f"Host to keep: {', '.join(HOSTS)} (xp keeps excel and powerpoint)"),
    manifest_format: str = typer.Argument("xml", help="Manifest format: json, anything else keeps the XML manifest"),
    project_name: str | None = typer.Argument(None, help="Display name written into the manifest"),
    app_id: str | None = typer.Argument(None, help="Unique id written into the manifest (default: random)"),
    root: Path = typer.Option(Path("."), "--root", "-C", help="Project directory to convert"),
    manifest_tool: str = typer.Option(
        DEFAULT_MANIFEST_TOOL,
        "--manifest-tool",
        envvar="SINGLEHOST_MANIFEST_TOOL",
        help="Command used to modify the manifest",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print warnings and errors"),
) -> None:
    """Prune the project template down to one host and one manifest format."""

    try:
        options = ConversionOptions.from_args(host, manifest_format, project_name, app_id, root)
    except InvalidArgumentError as e:
        err_console.print(f"Error modifying for single host: {e}", style="red", markup=False)
        raise typer.Exit(1)

    results = asyncio.run(run_conversion(options, manifest_tool))
    exit_code = report_results(results, quiet=quiet)

    if exit_code == 0 and not quiet:
        console.print(f"Converted project to single host '{options.host}'", style="green")

    raise typer.Exit(exit_code)

if __name__ == "__main__":
    app()
