"""Render recipes and shopping lists as text, JSON or YAML."""

from pathlib import Path
from typing import BinaryIO, Literal, get_args

import yaml

from cooklist.errors import OutputEncodingFailed, OutputWriteFailed
from cooklist.logging_config import get_logger
from cooklist.recipe.models import IngredientTable, Recipe
from cooklist.render.document import (
    CategoryNode,
    CookwareNode,
    Document,
    IngredientListDocument,
    IngredientNode,
    RecipeDocument,
    ShoppingListDocument,
    StepNode,
    build_document,
)
from cooklist.render.structured import render_json, render_yaml, to_tree
from cooklist.render.text import DEFAULT_WIDTH, render_text, wrap_text
from cooklist.shopping.shopping_list import ShoppingList

logger = get_logger(__name__)

OutputFormat = Literal["text", "json", "yaml"]
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)

FORMAT_BY_SUFFIX: dict[str, OutputFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".txt": "text",
}


def format_for_path(path: Path | str, default: OutputFormat = "text") -> OutputFormat:
    """Output format implied by a file extension, e.g. "json" for list.json."""
    return FORMAT_BY_SUFFIX.get(Path(path).suffix.lower(), default)


def render(
    data: Recipe | ShoppingList | IngredientTable,
    output_format: OutputFormat = "text",
    only_ingredients: bool = False,
    *,
    width: int = DEFAULT_WIDTH,
    pretty: bool = False,
    plain: bool = False,
) -> bytes:
    """
    Render a recipe or shopping list to UTF-8 bytes.

    The whole document is produced and encoded before returning, so a caller
    that writes the result never emits a partial document.

    Args:
        data: A parsed recipe, a shopping list or a bare ingredient table.
        output_format: "text", "json" or "yaml".
        only_ingredients: Only emit the ingredient listing.
        width: Maximum text line width for wrapped step lines.
        pretty: Indent JSON output.
        plain: Render a shopping list as one flat list, without aisles.

    Raises:
        ValueError: Unknown output format.
        OutputEncodingFailed: The document cannot be represented as UTF-8.
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unknown output format {output_format!r}")

    document = build_document(data, plain)

    try:
        if output_format == "json":
            text = render_json(document, only_ingredients, pretty)
        elif output_format == "yaml":
            text = render_yaml(document, only_ingredients)
        else:
            text = render_text(document, only_ingredients, width)
        return text.encode("utf-8")
    except (UnicodeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to render {output_format} output: {e}")
        raise OutputEncodingFailed(f"unable to encode {output_format} output ({e})") from e


def write_output(payload: bytes, stream: BinaryIO) -> None:
    """Write a rendered document in one piece."""
    stream.write(payload)
    stream.flush()


def write_output_file(payload: bytes, path: Path | str) -> None:
    """
    Write a rendered document to a file, replacing its contents.

    Raises:
        OutputWriteFailed: The file could not be created or written.
    """
    path = Path(path)
    try:
        with path.open("wb") as stream:
            write_output(payload, stream)
    except OSError as e:
        raise OutputWriteFailed(path, e.strerror or str(e)) from e
    logger.info(f"Wrote {len(payload)} bytes to {path}")


__all__ = [
    "DEFAULT_WIDTH",
    "FORMAT_BY_SUFFIX",
    "OUTPUT_FORMATS",
    "CategoryNode",
    "CookwareNode",
    "Document",
    "IngredientListDocument",
    "IngredientNode",
    "OutputFormat",
    "RecipeDocument",
    "ShoppingListDocument",
    "StepNode",
    "build_document",
    "format_for_path",
    "render",
    "render_json",
    "render_text",
    "render_yaml",
    "to_tree",
    "wrap_text",
    "write_output",
    "write_output_file",
]
