"""Changes that depend on the selected manifest format."""

from .fsops import delete_path, delete_paths, read_text, write_text
from .models import HOSTS, JSON_MANIFEST, XML_MANIFEST, ConversionOptions
from .vscode import update_tasks_json_file

WEBPACK_CONFIG = "webpack.config.js"


async def delete_manifest_files(options: ConversionOptions, manifest_format: str) -> list[str]:
    """Delete the canonical manifest and per-host variants of one format.

    The canonical manifest is required; per-host variants are optional.
    """
    canonical = f"manifest.{manifest_format}"
    delete_path(options.path(canonical))

    variants = [options.path(f"manifest.{host}.{manifest_format}") for host in HOSTS]
    deleted = await delete_paths(variants, optional=True)
    return [canonical] + [path.name for path in deleted]


def update_webpack_config_for_json_manifest(options: ConversionOptions) -> int:
    """Point webpack at the JSON manifest.

    Returns:
        Number of replaced extensions
    """
    path = options.path(WEBPACK_CONFIG)
    content = read_text(path)
    count = content.count(".xml")
    write_text(path, content.replace(".xml", ".json"))
    return count


async def modify_project_for_json_manifest(options: ConversionOptions) -> list[str]:
    notes = []
    count = update_webpack_config_for_json_manifest(options)
    notes.append(f"Updated {count} manifest reference(s) in {WEBPACK_CONFIG}")

    changed = update_tasks_json_file(options)
    if changed:
        notes.append(f"Tasks now depending on Install: {', '.join(changed)}")

    deleted = await delete_manifest_files(options, XML_MANIFEST)
    notes.extend(f"Deleted {name}" for name in deleted)
    return notes


async def modify_project_for_manifest_format(options: ConversionOptions) -> list[str]:
    """Keep only the files relevant to the selected manifest format."""
    if options.is_json_manifest:
        return await modify_project_for_json_manifest(options)

    deleted = await delete_manifest_files(options, JSON_MANIFEST)
    return [f"Deleted {name}" for name in deleted]
