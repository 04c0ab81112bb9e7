"""JSON and YAML output."""

import json
from typing import Any

import yaml

from cooklist.render.document import (
    Document,
    IngredientListDocument,
    IngredientNode,
    RecipeDocument,
)


def _ingredients(nodes: tuple[IngredientNode, ...]) -> list[dict[str, str]]:
    return [{"name": node.name, "amount": node.amount} for node in nodes]


def to_tree(document: Document, only_ingredients: bool = False) -> Any:
    """
    Convert a document into plain dicts and lists.

    A recipe becomes ``{metadata, ingredients, cookware, steps}`` (only
    ``ingredients`` when only_ingredients is set); a shopping list becomes a
    mapping from category to its ingredients, in display order; a plain
    ingredient list becomes a flat list of ingredients.
    """
    if isinstance(document, RecipeDocument):
        if only_ingredients:
            return {"ingredients": _ingredients(document.ingredients)}
        return {
            "metadata": dict(document.metadata),
            "ingredients": _ingredients(document.ingredients),
            "cookware": [{"name": node.name} for node in document.cookware],
            "steps": [{"description": step.description} for step in document.steps],
        }

    if isinstance(document, IngredientListDocument):
        return _ingredients(document.ingredients)

    return {category.name: _ingredients(category.ingredients) for category in document.categories}


def render_json(document: Document, only_ingredients: bool = False, pretty: bool = False) -> str:
    text = json.dumps(
        to_tree(document, only_ingredients),
        ensure_ascii=False,
        indent=2 if pretty else None,
    )
    return text + "\n"


def render_yaml(document: Document, only_ingredients: bool = False) -> str:
    return yaml.safe_dump(
        to_tree(document, only_ingredients),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
