"""Run the conversion stages in order."""

from .manifest_format import modify_project_for_manifest_format
from .manifest_identity import DEFAULT_MANIFEST_TOOL, update_manifest_identity
from .models import ConversionOptions, StageResult
from .package_json import update_package_json_for_single_host
from .prune import convert_project_to_single_host, delete_support_files
from .vscode import update_launch_json_file


async def modify_project_for_single_host(options: ConversionOptions) -> list[str]:
    notes = await convert_project_to_single_host(options)
    update_package_json_for_single_host(options)
    notes.append("Updated package.json")
    if update_launch_json_file(options):
        notes.append("Removed 'Debug Tests' from launch.json")
    else:
        notes.append("Warning: no 'Debug Tests' configuration found in launch.json")
    return notes


async def run_conversion(
    options: ConversionOptions, manifest_tool: str = DEFAULT_MANIFEST_TOOL
) -> list[StageResult]:
    """Run every stage, even after an earlier one failed.

    Stages are not transactional: a failing stage leaves whatever it already
    changed in place.

    Args:
        options: Validated conversion options
        manifest_tool: Command used to invoke the manifest tool

    Returns:
        One result per stage that ran
    """
    format_context = "modifying for JSON manifest" if options.is_json_manifest else "removing JSON manifest files"
    stages = [
        ("modifying for single host", modify_project_for_single_host(options)),
        (format_context, modify_project_for_manifest_format(options)),
    ]
    if options.project_name:
        stages.append(("updating the manifest", _identity_stage(options, manifest_tool)))
    stages.append(("deleting support files", _support_files_stage(options)))

    results = []
    for name, stage in stages:
        result = StageResult(name=name)
        try:
            result.notes = await stage
        except Exception as e:
            result.error = str(e)
        results.append(result)

    return results


async def _identity_stage(options: ConversionOptions, manifest_tool: str) -> list[str]:
    output = await update_manifest_identity(options, manifest_tool)
    return [output.strip()] if output and output.strip() else []


async def _support_files_stage(options: ConversionOptions) -> list[str]:
    return [f"Deleted {name}" for name in delete_support_files(options)]
