"""File-system helpers shared by the conversion stages."""

import asyncio
import json
import shutil
from pathlib import Path

from .errors import ConversionError, ParseFailureError


def delete_path(path: Path, optional: bool = False) -> bool:
    """Delete a single file.

    Args:
        path: File to delete
        optional: Skip silently when the file does not exist

    Returns:
        True if a file was deleted, False if an optional file was absent

    Raises:
        FileNotFoundError: If a required file does not exist
    """
    if optional and not path.exists():
        return False
    path.unlink()
    return True


async def delete_paths(paths: list[Path], optional: bool = False) -> list[Path]:
    """Delete files concurrently and wait for every deletion to finish.

    Returns:
        The paths that were actually deleted
    """
    tasks = [asyncio.to_thread(delete_path, path, optional) for path in paths]
    deleted = await asyncio.gather(*tasks)
    return [path for path, was_deleted in zip(paths, deleted) if was_deleted]


def delete_folder(folder: Path) -> bool:
    """Recursively delete a folder if it exists."""
    if not folder.exists():
        return False
    try:
        shutil.rmtree(folder)
    except OSError as e:
        raise ConversionError(f'Unable to delete folder "{folder.resolve()}".\n{e}') from e
    return True


def read_text(path: Path) -> str:
    """Read a text file keeping its line endings as they are."""
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, content: str) -> None:
    """Write a text file without translating line endings."""
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def read_json(path: Path) -> dict:
    """Load a JSON document, wrapping decode errors with the file name."""
    data = read_text(path)
    try:
        document = json.loads(data)
    except json.JSONDecodeError as e:
        raise ParseFailureError(f"Unable to parse {path.name}: {e}", path=str(path)) from e
    if not isinstance(document, dict):
        raise ParseFailureError(f"{path.name} does not contain a JSON object", path=str(path))
    return document


def write_json(path: Path, content: dict) -> None:
    """Write a JSON document with two-space indentation."""
    write_text(path, json.dumps(content, indent=2, ensure_ascii=False))
