"""Edits to the VS Code launch and tasks configuration."""

import json
import re

from .fsops import read_json, read_text, write_json, write_text
from .models import ConversionOptions

LAUNCH_JSON = ".vscode/launch.json"
TASKS_JSON = ".vscode/tasks.json"

DEBUG_TESTS = "Debug Tests"
INSTALL_TASK = "Install"

DEBUG_TESTS_PATTERN = re.compile(
    r'"configurations": \[\r?\n(.*{(.*\r?\n)*?.*"name": "Debug Tests",\r?\n(.*\r?\n)*?.*},)',
    re.MULTILINE,
)


def remove_debug_tests(text: str) -> tuple[str, bool]:
    """Remove the "Debug Tests" launch configuration.

    Strict JSON documents are edited structurally. Documents JSON cannot
    read (comments, trailing commas) fall back to a textual match.

    Returns:
        The updated text and whether a configuration was removed
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        updated, count = DEBUG_TESTS_PATTERN.subn('"configurations": [', text)
        return updated, count > 0

    configurations = document.get("configurations") if isinstance(document, dict) else None
    if not isinstance(configurations, list):
        return text, False

    kept = [
        entry for entry in configurations
        if not (isinstance(entry, dict) and entry.get("name") == DEBUG_TESTS)
    ]
    if len(kept) == len(configurations):
        return text, False

    # Re-serialized, so layout outside the removed entry is normalized too.
    document["configurations"] = kept
    newline = "\r\n" if "\r\n" in text else "\n"
    updated = json.dumps(document, indent=2, ensure_ascii=False).replace("\n", newline)
    if text.endswith("\n"):
        updated += newline
    return updated, True


def update_launch_json_file(options: ConversionOptions) -> bool:
    """Drop the test debugging configuration from launch.json.

    Returns:
        False when there was no matching configuration to remove
    """
    path = options.path(LAUNCH_JSON)
    text = read_text(path)
    updated, removed = remove_debug_tests(text)
    if removed:
        write_text(path, updated)
    return removed


def make_tasks_depend_on_install(content: dict) -> list[str]:
    """Point build and debug tasks at the Install task.

    Returns:
        Labels of the tasks that were changed
    """
    changed = []
    for task in content.get("tasks") or []:
        if not isinstance(task, dict):
            continue
        label = task.get("label") or ""
        if not isinstance(label, str):
            continue
        if label.startswith(("Build", "Debug:")):
            task["dependsOn"] = [INSTALL_TASK]
            changed.append(label)
    return changed


def update_tasks_json_file(options: ConversionOptions) -> list[str]:
    """Rewrite tasks.json so build tasks install dependencies first."""
    path = options.path(TASKS_JSON)
    content = read_json(path)
    changed = make_tasks_depend_on_install(content)
    write_json(path, content)
    return changed
