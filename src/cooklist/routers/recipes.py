"""API routes for browsing and reading recipes."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, Response

from cooklist.catalog.files import build_catalog
from cooklist.config import Settings, get_settings
from cooklist.errors import CookError
from cooklist.logging_config import get_logger
from cooklist.recipe.adapter import load_recipe
from cooklist.render import render
from cooklist.routers.common import http_error, resolve_recipe_path
from cooklist.schemas import CatalogDirectory, RecipeResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])

MEDIA_TYPES = {
    "json": "application/json",
    "yaml": "application/yaml",
}


@router.get("/catalog")
def get_catalog(settings: Annotated[Settings, Depends(get_settings)]) -> CatalogDirectory:
    """Tree of the recipe files below the recipes directory."""
    try:
        tree = build_catalog(settings.recipes_dir, settings.recipe_suffix)
    except CookError as e:
        logger.error(f"Failed to build catalog: {e}")
        raise http_error(e) from e
    return CatalogDirectory.model_validate(tree)


@router.get("/recipes/{path:path}", responses={200: {"model": RecipeResponse}})
def get_recipe(
    path: str,
    settings: Annotated[Settings, Depends(get_settings)],
    output_format: Annotated[Literal["json", "yaml"], Query(alias="format")] = "json",
    only_ingredients: bool = False,
) -> Response:
    """A single recipe as a JSON (or YAML) document."""
    recipe_path = resolve_recipe_path(settings, path)

    try:
        recipe = load_recipe(recipe_path)
        payload = render(recipe, output_format, only_ingredients)
    except CookError as e:
        logger.warning(f"Failed to serve recipe {path}: {e}")
        raise http_error(e) from e

    return Response(content=payload, media_type=MEDIA_TYPES[output_format])
