"""Expand file and directory arguments into recipe file paths."""

from collections.abc import Sequence
from pathlib import Path

from cooklist.errors import FileListingFailed
from cooklist.logging_config import get_logger

logger = get_logger(__name__)

RECIPE_SUFFIX = ".cook"


def resolve(inputs: Sequence[Path | str], suffix: str = RECIPE_SUFFIX) -> list[Path]:
    """
    Turn command-line style inputs into a list of recipe files.

    A single existing directory expands to the recipe files directly inside
    it, sorted by name. Anything else is returned as given: a path that is
    not a recipe only fails later, when it is read.

    Raises:
        FileListingFailed: The directory could not be enumerated.
    """
    paths = [Path(p) for p in inputs]

    if len(paths) != 1 or not paths[0].is_dir():
        return paths

    directory = paths[0]
    try:
        entries = sorted(entry.name for entry in directory.iterdir())
    except OSError as e:
        raise FileListingFailed(directory, e.strerror or str(e)) from e

    files = [directory / name for name in entries if name.endswith(suffix)]
    logger.debug(f"Found {len(files)} recipe files in {directory}")
    return files


def build_catalog(root: Path | str, suffix: str = RECIPE_SUFFIX) -> dict:
    """
    Build a nested tree of the recipe files below root.

    Directories are ``{"type": "directory", "children": {...}}`` and recipes
    are ``{"type": "file"}`` keyed by their name without the suffix. Hidden
    entries are skipped; empty directories are left out.

    Raises:
        FileListingFailed: root (or a directory below it) cannot be listed.
    """
    root = Path(root)
    children: dict[str, dict] = {}

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileListingFailed(root, e.strerror or str(e)) from e

    for entry in entries:
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            subtree = build_catalog(entry, suffix)
            if subtree["children"]:
                children[entry.name] = subtree
        elif entry.is_file() and entry.name.endswith(suffix):
            children[entry.name[: -len(suffix)]] = {"type": "file"}

    return {"type": "directory", "children": children}
