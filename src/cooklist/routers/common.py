"""Helpers shared by the API routers."""

from pathlib import Path

from fastapi import HTTPException, status

from cooklist.config import Settings
from cooklist.errors import (
    CookError,
    FileListingFailed,
    RecipeUnparsable,
    RecipeUnreadable,
)

ERROR_STATUS: dict[type[CookError], int] = {
    RecipeUnparsable: 422,
    RecipeUnreadable: status.HTTP_404_NOT_FOUND,
    FileListingFailed: status.HTTP_404_NOT_FOUND,
}


def http_error(error: CookError) -> HTTPException:
    """Map a cooklist error onto an HTTP error response."""
    code = ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=str(error))


def resolve_recipe_path(settings: Settings, relative: str, add_suffix: bool = True) -> Path:
    """
    Resolve a client-supplied path inside the recipes directory.

    Raises:
        HTTPException: 404 when the path points outside the recipes directory.
    """
    root = settings.recipes_dir.resolve()
    if add_suffix and not relative.endswith(settings.recipe_suffix):
        relative = f"{relative}{settings.recipe_suffix}"

    candidate = (root / relative).resolve()
    if candidate != root and not candidate.is_relative_to(root):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe {relative} not found",
        )
    return candidate
