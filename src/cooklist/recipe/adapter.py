"""Boundary between recipe files on disk and the recipe parser."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from cooklist.errors import RecipeUnparsable, RecipeUnreadable
from cooklist.logging_config import LoggingContext, get_logger
from cooklist.recipe.models import IngredientTable, Recipe
from cooklist.recipe.parser import RecipeParseError, parse_recipe

logger = get_logger(__name__)

RecipeParserFunc = Callable[[str], Recipe]


def read_recipe_text(path: Path | str) -> str:
    """Read a recipe file as UTF-8 text."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RecipeUnreadable(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise RecipeUnreadable(path, e.strerror or str(e)) from e


def load_recipe(path: Path | str, parser: RecipeParserFunc | None = None) -> Recipe:
    """
    Read and parse one recipe file.

    Every call reads the file again; nothing is cached.

    Raises:
        RecipeUnreadable: The file could not be read as UTF-8.
        RecipeUnparsable: The parser rejected the contents.
    """
    path = Path(path)
    parse = parser or parse_recipe

    with LoggingContext(recipe=str(path)):
        text = read_recipe_text(path)
        try:
            recipe = parse(text)
        except (RecipeParseError, ValueError) as e:
            raise RecipeUnparsable(path, e) from e

        recipe.source = path
        logger.debug(f"Loaded {len(recipe.ingredients)} ingredients")
        return recipe


def load_ingredients(path: Path | str, parser: RecipeParserFunc | None = None) -> IngredientTable:
    """Load only the ingredient table of a recipe file."""
    return load_recipe(path, parser).ingredients


def load_recipes(
    paths: Sequence[Path | str],
    workers: int = 1,
    parser: RecipeParserFunc | None = None,
) -> list[Recipe]:
    """
    Load several recipe files, keeping the order of ``paths``.

    Args:
        paths: Recipe files, usually the output of the file resolver.
        workers: Number of threads to load with. 1 loads sequentially.
        parser: Optional replacement for the default Cooklang parser.

    Returns:
        Recipes in the same order as ``paths``.

    Raises:
        RecipeUnreadable, RecipeUnparsable: For the first failing path, in
            input order. No partial result is returned.
    """
    if workers <= 1 or len(paths) <= 1:
        return [load_recipe(path, parser) for path in paths]

    logger.debug(f"Loading {len(paths)} recipes with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order and re-raises the first failure
        return list(executor.map(lambda p: load_recipe(p, parser), paths))
