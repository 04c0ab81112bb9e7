"""API route for building a shopping list."""

from typing import Annotated, Literal

from fastapi import APIRouter, Body, Depends, Query, Response

from cooklist.catalog.config_files import load_config
from cooklist.config import Settings, get_settings
from cooklist.errors import CookError
from cooklist.logging_config import get_logger
from cooklist.render import render
from cooklist.routers.common import http_error, resolve_recipe_path
from cooklist.routers.recipes import MEDIA_TYPES
from cooklist.shopping.shopping_list import ShoppingListGenerator

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["shopping list"])


def get_generator(settings: Annotated[Settings, Depends(get_settings)]) -> ShoppingListGenerator:
    """Shopping list generator with the aisle config found for this request."""
    try:
        aisle = load_config("aisle", config_dir=settings.config_dir)
        inflection = load_config("inflection", config_dir=settings.config_dir)
    except CookError as e:
        logger.error(f"Failed to load config: {e}")
        raise http_error(e) from e

    return ShoppingListGenerator(
        aisle,
        inflection,
        suffix=settings.recipe_suffix,
        workers=settings.load_workers,
    )


@router.post("/shopping_list")
def create_shopping_list(
    recipes: Annotated[list[str], Body(min_length=1)],
    settings: Annotated[Settings, Depends(get_settings)],
    generator: Annotated[ShoppingListGenerator, Depends(get_generator)],
    output_format: Annotated[Literal["json", "yaml"], Query(alias="format")] = "json",
) -> Response:
    """
    Combine recipes into a categorized shopping list.

    The body is a list of recipe paths relative to the recipes directory, or
    a single directory.
    """
    paths = [resolve_recipe_path(settings, recipe, add_suffix=False) for recipe in recipes]

    try:
        shopping_list = generator.generate(paths)
        payload = render(shopping_list, output_format)
    except CookError as e:
        logger.warning(f"Failed to build shopping list: {e}")
        raise http_error(e) from e

    return Response(content=payload, media_type=MEDIA_TYPES[output_format])
