"""Indented, word-wrapped plain text output."""

from cooklist.render.document import (
    Document,
    IngredientListDocument,
    IngredientNode,
    RecipeDocument,
    ShoppingListDocument,
    StepNode,
)

OFFSET_UNIT = 4
NAME_COLUMN = 30
DEFAULT_WIDTH = 100


# =============================================================================
# Word wrapping
# =============================================================================


def wrap_text(text: str, width: int, subsequent_width: int | None = None) -> list[str]:
    """
    Break text into lines no longer than width.

    Lines break at the last space at or before the width boundary; the space
    itself is dropped. Without such a space the line is cut inside the word
    exactly at the boundary.

    Args:
        text: Text to wrap.
        width: Maximum length of the first line.
        subsequent_width: Maximum length of the following lines, defaults to
            width.
    """
    limit = max(width, 1)
    rest_limit = max(subsequent_width if subsequent_width is not None else width, 1)

    lines: list[str] = []
    while len(text) > limit:
        cut = text.rfind(" ", 0, limit + 1)
        if cut <= 0:
            lines.append(text[:limit])
            text = text[limit:]
        else:
            lines.append(text[:cut])
            text = text[cut + 1 :]
        limit = rest_limit
    lines.append(text)
    return lines


def indented(text: str, offset: int) -> str:
    return " " * offset + text


def wrapped(text: str, offset: int, width: int) -> list[str]:
    """Wrap text at offset; continuation lines get one more indent unit."""
    continuation = offset + OFFSET_UNIT
    parts = wrap_text(text, width - offset, width - continuation)
    return [indented(parts[0], offset)] + [indented(part, continuation) for part in parts[1:]]


# =============================================================================
# Lines
# =============================================================================


def ingredient_line(node: IngredientNode, offset: int) -> str:
    name = node.name[:NAME_COLUMN].ljust(NAME_COLUMN)
    return indented(f"{name}{node.amount}", offset)


def ingredient_lines(nodes: tuple[IngredientNode, ...], offset: int) -> list[str]:
    return [ingredient_line(node, offset) for node in nodes]


def step_lines(step: StepNode, offset: int, width: int) -> list[str]:
    lines = wrapped(f"{step.number:>2}. {step.description}", offset, width)
    if step.ingredients:
        used = "; ".join(f"{node.name}: {node.amount}" for node in step.ingredients)
        lines.extend(wrapped(f"[{used}]", offset + OFFSET_UNIT, width))
    return lines


def recipe_lines(
    document: RecipeDocument, only_ingredients: bool = False, width: int = DEFAULT_WIDTH
) -> list[str]:
    if only_ingredients:
        return ingredient_lines(document.ingredients, 0)

    lines: list[str] = []
    if document.metadata:
        lines.append("Metadata:")
        for key, value in document.metadata.items():
            lines.append(indented(f"{key}: {value}", OFFSET_UNIT))
        lines.append("")

    lines.append("Ingredients:")
    lines.extend(ingredient_lines(document.ingredients, OFFSET_UNIT))
    lines.append("")

    if document.cookware:
        lines.append("Cookware:")
        lines.extend(indented(node.name, OFFSET_UNIT) for node in document.cookware)
        lines.append("")

    lines.append("Steps:")
    for step in document.steps:
        lines.extend(step_lines(step, OFFSET_UNIT, width))
    return lines


def shopping_list_lines(
    document: ShoppingListDocument, only_ingredients: bool = False
) -> list[str]:
    lines: list[str] = []
    for category in document.categories:
        if only_ingredients:
            lines.extend(ingredient_lines(category.ingredients, 0))
            continue
        lines.append(category.name)
        lines.extend(ingredient_lines(category.ingredients, OFFSET_UNIT))
        lines.append("")
    return lines


def render_text(
    document: Document, only_ingredients: bool = False, width: int = DEFAULT_WIDTH
) -> str:
    """Render a document as newline-terminated text lines."""
    if isinstance(document, RecipeDocument):
        lines = recipe_lines(document, only_ingredients, width)
    elif isinstance(document, IngredientListDocument):
        lines = ingredient_lines(document.ingredients, 0)
    else:
        lines = shopping_list_lines(document, only_ingredients)

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
