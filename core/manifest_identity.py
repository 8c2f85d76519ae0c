"""Invocation of the external manifest-editing tool."""

import asyncio
import shlex

from .errors import ManifestToolError
from .models import ConversionOptions

DEFAULT_MANIFEST_TOOL = "npx office-addin-manifest"
DEFAULT_APP_ID = "random"


def build_modify_command(options: ConversionOptions, tool: str = DEFAULT_MANIFEST_TOOL) -> list[str]:
    """Build the command line that writes the project name and id into the manifest."""
    app_id = options.app_id or DEFAULT_APP_ID
    return [
        *shlex.split(tool),
        "modify",
        options.manifest_path,
        "-g",
        app_id,
        "-d",
        options.project_name or "",
    ]


async def update_manifest_identity(
    options: ConversionOptions, tool: str = DEFAULT_MANIFEST_TOOL
) -> str | None:
    """Run the manifest tool when a project name was given.

    Args:
        options: Conversion options
        tool: Command used to invoke the manifest tool

    Returns:
        The tool's standard output, or None if there was nothing to do

    Raises:
        ManifestToolError: If the tool cannot be started or exits non-zero
    """
    if not options.project_name:
        return None

    command = build_modify_command(options, tool)
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=options.root,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ManifestToolError(f"Unable to run {command[0]}: {e}") from e

    stdout, stderr = await process.communicate()
    error_output = stderr.decode(errors="replace").strip()
    if process.returncode != 0:
        raise ManifestToolError(
            f"Command failed with exit code {process.returncode}: {shlex.join(command)}\n{error_output}",
            returncode=process.returncode,
            stderr=error_output,
        )

    return stdout.decode(errors="replace")
