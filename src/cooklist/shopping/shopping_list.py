"""Shopping list generation from recipe files."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from cooklist.catalog.config_files import load_config
from cooklist.catalog.files import RECIPE_SUFFIX, resolve
from cooklist.logging_config import get_logger
from cooklist.recipe.adapter import RecipeParserFunc, load_recipes
from cooklist.recipe.models import IngredientTable, Recipe
from cooklist.shopping.aggregate import merge
from cooklist.shopping.categorize import (
    DEFAULT_CATEGORIES,
    CategoryDefaults,
    categorize,
    sorted_sections,
)

logger = get_logger(__name__)


@dataclass
class ShoppingList:
    """Ingredients of several recipes, merged and grouped into aisles."""

    recipes: list[Recipe] = field(default_factory=list)
    aisle: Mapping[str, str] | None = None
    # loaded and carried along; names are not rewritten with it
    inflection: Mapping[str, str] | None = None
    defaults: CategoryDefaults = DEFAULT_CATEGORIES

    @cached_property
    def ingredients(self) -> IngredientTable:
        """All recipe ingredients merged in recipe order."""
        return merge(recipe.ingredients for recipe in self.recipes)

    @cached_property
    def sections(self) -> dict[str, IngredientTable]:
        """Ingredients grouped by category, in first-seen order."""
        return categorize(self.ingredients, self.aisle, defaults=self.defaults)

    def sorted_sections(self) -> list[tuple[str, IngredientTable]]:
        """Sections in display order."""
        return list(sorted_sections(self.sections))


class ShoppingListGenerator:
    """
    Generates shopping lists from recipe files:
    - File and directory resolution
    - Per-recipe loading and parsing
    - Ingredient merging across recipes
    - Aisle categorization
    """

    def __init__(
        self,
        aisle: Mapping[str, str] | None = None,
        inflection: Mapping[str, str] | None = None,
        *,
        suffix: str = RECIPE_SUFFIX,
        workers: int = 1,
        parser: RecipeParserFunc | None = None,
        defaults: CategoryDefaults = DEFAULT_CATEGORIES,
    ):
        self.aisle = aisle
        self.inflection = inflection
        self.suffix = suffix
        self.workers = workers
        self.parser = parser
        self.defaults = defaults

    @classmethod
    def from_config_files(
        cls,
        aisle_path: Path | str | None = None,
        inflection_path: Path | str | None = None,
        **kwargs,
    ) -> "ShoppingListGenerator":
        """
        Create a generator with the aisle and inflection files loaded.

        Raises:
            ConfigUnreadable: A config file exists but cannot be read.
        """
        aisle = load_config("aisle", aisle_path)
        inflection = load_config("inflection", inflection_path)
        return cls(aisle, inflection, **kwargs)

    def generate(self, inputs: Sequence[Path | str]) -> ShoppingList:
        """
        Generate a shopping list from recipe files or a single directory.

        Args:
            inputs: Recipe file paths, or exactly one directory of recipes.

        Returns:
            ShoppingList with merged and categorized ingredients.

        Raises:
            FileListingFailed: The directory could not be listed.
            RecipeUnreadable, RecipeUnparsable: The first recipe that failed;
                no partial list is produced.
        """
        files = resolve(inputs, self.suffix)
        logger.info(f"Generating shopping list from {len(files)} recipes")

        recipes = load_recipes(files, workers=self.workers, parser=self.parser)
        shopping_list = ShoppingList(
            recipes=recipes,
            aisle=self.aisle,
            inflection=self.inflection,
            defaults=self.defaults,
        )

        logger.info(
            f"Generated shopping list: {len(shopping_list.ingredients)} ingredients "
            f"in {len(shopping_list.sections)} sections"
        )
        return shopping_list
