"""Intermediate document model shared by every output format.

A recipe or shopping list is turned into one of these documents first; the
text and structured renderers only ever walk the document.
"""

from dataclasses import dataclass, field

from cooklist.recipe.models import IngredientTable, Recipe
from cooklist.shopping.shopping_list import ShoppingList


@dataclass(frozen=True)
class IngredientNode:
    name: str
    amount: str


@dataclass(frozen=True)
class CookwareNode:
    name: str


@dataclass(frozen=True)
class StepNode:
    number: int
    description: str
    ingredients: tuple[IngredientNode, ...] = ()


@dataclass(frozen=True)
class CategoryNode:
    name: str
    ingredients: tuple[IngredientNode, ...] = ()


@dataclass(frozen=True)
class RecipeDocument:
    """Full view of a single recipe."""

    ingredients: tuple[IngredientNode, ...] = ()
    cookware: tuple[CookwareNode, ...] = ()
    steps: tuple[StepNode, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ShoppingListDocument:
    """Categories in display order."""

    categories: tuple[CategoryNode, ...] = ()


@dataclass(frozen=True)
class IngredientListDocument:
    """Merged ingredients without aisle grouping, in merge order."""

    ingredients: tuple[IngredientNode, ...] = ()


Document = RecipeDocument | ShoppingListDocument | IngredientListDocument


def ingredient_nodes(table: IngredientTable) -> tuple[IngredientNode, ...]:
    return tuple(IngredientNode(name, table.describe(name)) for name in table)


def recipe_document(recipe: Recipe) -> RecipeDocument:
    return RecipeDocument(
        ingredients=ingredient_nodes(recipe.ingredients),
        cookware=tuple(CookwareNode(c.name) for c in recipe.cookware),
        steps=tuple(
            StepNode(index, step.description, ingredient_nodes(step.ingredients))
            for index, step in enumerate(recipe.steps, start=1)
        ),
        metadata=dict(recipe.metadata),
    )


def shopping_list_document(shopping_list: ShoppingList) -> ShoppingListDocument:
    return ShoppingListDocument(
        categories=tuple(
            CategoryNode(name, ingredient_nodes(table))
            for name, table in shopping_list.sorted_sections()
        )
    )


def build_document(
    data: Recipe | ShoppingList | IngredientTable, plain: bool = False
) -> Document:
    """
    Build the document for a recipe, a shopping list or a bare table.

    A bare ingredient table is treated as an uncategorized shopping list.
    With plain set, a shopping list keeps its merged ingredients as one flat
    list instead of grouping them into aisles.
    """
    if isinstance(data, Recipe):
        return recipe_document(data)
    if isinstance(data, IngredientTable):
        data = ShoppingList(recipes=[Recipe(ingredients=data)])
    if isinstance(data, ShoppingList):
        if plain:
            return IngredientListDocument(ingredient_nodes(data.ingredients))
        return shopping_list_document(data)
    raise TypeError(f"cannot render {type(data).__name__}")
