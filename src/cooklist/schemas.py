"""Pydantic schemas describing the HTTP API responses."""

from typing import Literal

from pydantic import BaseModel, Field


class IngredientEntry(BaseModel):
    """One ingredient with its rendered amounts."""

    name: str
    amount: str = Field(description="Amounts joined in collection order, e.g. '200 g, 100 g'")


class CookwareEntry(BaseModel):
    name: str


class StepEntry(BaseModel):
    description: str


class RecipeResponse(BaseModel):
    """A single recipe."""

    metadata: dict[str, str] = Field(default_factory=dict)
    ingredients: list[IngredientEntry]
    cookware: list[CookwareEntry] = Field(default_factory=list)
    steps: list[StepEntry] = Field(default_factory=list)


class CatalogFile(BaseModel):
    type: Literal["file"] = "file"


class CatalogDirectory(BaseModel):
    """A directory of recipes; children are keyed by name."""

    type: Literal["directory"] = "directory"
    children: dict[str, "CatalogDirectory | CatalogFile"] = Field(default_factory=dict)


CatalogDirectory.model_rebuild()
