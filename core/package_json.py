"""package.json rewrite for a single host."""

from .fsops import read_json, write_json
from .models import ConversionOptions

PACKAGE_JSON = "package.json"

TEST_PACKAGES = [
    "@types/mocha",
    "@types/node",
    "current-processes",
    "mocha",
    "office-addin-test-helpers",
    "office-addin-test-server",
    "ts-node",
]

CONVERT_SCRIPT = "convert-to-single-host"


def _is_host_script(key: str) -> bool:
    return key.startswith(("sideload:", "unload:")) or key == CONVERT_SCRIPT


def rewrite_package_descriptor(content: dict, options: ConversionOptions) -> dict:
    """Apply the single-host edits to a parsed package.json document.

    Args:
        content: Parsed package.json, modified in place
        options: Conversion options

    Returns:
        The same document, for convenience
    """
    content.setdefault("config", {})["app_to_debug"] = options.debug_host

    content.pop("engines", None)

    scripts = content.setdefault("scripts", {})
    for key in [key for key in scripts if key.startswith("start:")]:
        del scripts[key]

    for key in [key for key in scripts if _is_host_script(key)]:
        del scripts[key]

    # Substring match, so any script mentioning "test" goes too.
    for key in [key for key in scripts if "test" in key]:
        del scripts[key]

    dev_dependencies = content.get("devDependencies", {})
    for key in [key for key in dev_dependencies if key in TEST_PACKAGES]:
        del dev_dependencies[key]

    manifest = f"manifest.{options.manifest_format}"
    scripts["start"] = f"office-addin-debugging start {manifest}"
    scripts["stop"] = f"office-addin-debugging stop {manifest}"
    scripts["validate"] = f"office-addin-manifest validate {manifest}"

    return content


def update_package_json_for_single_host(options: ConversionOptions) -> None:
    """Rewrite package.json in the project directory."""
    path = options.path(PACKAGE_JSON)
    content = read_json(path)
    rewrite_package_descriptor(content, options)
    write_json(path, content)
