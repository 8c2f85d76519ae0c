"""Pruning of per-host sources, manifests and repository scaffolding."""

import re
import shutil

from .fsops import delete_folder, delete_path, delete_paths, read_text, write_text
from .models import HOSTS, ConversionOptions

CONTENT_FILE = "src/content/content.js"

AUXILIARY_FOLDERS = ["test", ".github", ".azure-devops"]

SUPPORT_FILES = [
    "CONTRIBUTING.md",
    ".gitignore",
    "LICENSE",
    "README.md",
    "SECURITY.md",
    "CODE_OF_CONDUCT.md",
    "SUPPORT.md",
    ".npmrc",
    "package-lock.json",
    "convertToSingleHost.js",
]

BLANK_LINES = re.compile(r"^\s*[\r\n]", re.MULTILINE)


def remove_host_import(content_code: str, host: str) -> str:
    """Drop the import of a host module and collapse the blank lines left behind."""
    content_code = content_code.replace(f'import "./{host}";', "", 1)
    return BLANK_LINES.sub("", content_code)


def copy_host_manifest(options: ConversionOptions) -> bool:
    """Copy the host's manifest template over the canonical manifest, if there is one."""
    template = options.path(f"manifest.{options.host}.{options.manifest_format}")
    if not template.exists():
        return False

    manifest = options.path(f"manifest.{options.manifest_format}")
    shutil.copyfile(template, manifest)
    return True


async def convert_project_to_single_host(options: ConversionOptions) -> list[str]:
    """Remove sources, imports and manifest templates of hosts that are not kept.

    Returns:
        Notes describing what was removed
    """
    notes = []
    if copy_host_manifest(options):
        notes.append(f"Copied manifest.{options.host}.{options.manifest_format} to manifest.{options.manifest_format}")

    content_path = options.path(CONTENT_FILE)
    content_code = read_text(content_path)

    host_sources = []
    for host in HOSTS:
        if host not in options.target_hosts:
            host_sources.append(options.path(f"src/content/{host}.js"))
            content_code = remove_host_import(content_code, host)

    templates = [options.path(f"manifest.{host}.{options.manifest_format}") for host in HOSTS]

    deleted = await delete_paths(host_sources + templates, optional=True)
    notes.extend(f"Deleted {path.relative_to(options.root)}" for path in deleted)

    write_text(content_path, content_code)

    for folder in AUXILIARY_FOLDERS:
        if delete_folder(options.path(folder)):
            notes.append(f"Deleted {folder}/")

    return notes


def delete_support_files(options: ConversionOptions) -> list[str]:
    """Delete repository scaffolding files that make no sense in a generated project."""
    deleted = []
    for name in SUPPORT_FILES:
        if delete_path(options.path(name), optional=True):
            deleted.append(name)
    return deleted
