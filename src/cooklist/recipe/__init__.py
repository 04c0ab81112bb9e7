"""Recipe model, parser and file adapter."""

from cooklist.recipe.adapter import (
    load_ingredients,
    load_recipe,
    load_recipes,
    read_recipe_text,
)
from cooklist.recipe.models import (
    Amount,
    Cookware,
    Direction,
    IngredientTable,
    Recipe,
    Step,
    describe_amounts,
)
from cooklist.recipe.parser import (
    RecipeParseError,
    RecipeParser,
    parse_amount,
    parse_quantity,
    parse_recipe,
)

__all__ = [
    "Amount",
    "Cookware",
    "Direction",
    "IngredientTable",
    "Recipe",
    "RecipeParseError",
    "RecipeParser",
    "Step",
    "describe_amounts",
    "load_ingredients",
    "load_recipe",
    "load_recipes",
    "parse_amount",
    "parse_quantity",
    "parse_recipe",
    "read_recipe_text",
]
