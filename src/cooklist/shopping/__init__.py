"""Merging recipe ingredients and grouping them into aisles."""

from cooklist.shopping.aggregate import merge
from cooklist.shopping.categorize import (
    DEFAULT_CATEGORIES,
    CategoryDefaults,
    categorize,
    category_for,
    sorted_sections,
)
from cooklist.shopping.shopping_list import ShoppingList, ShoppingListGenerator

__all__ = [
    "DEFAULT_CATEGORIES",
    "CategoryDefaults",
    "ShoppingList",
    "ShoppingListGenerator",
    "categorize",
    "category_for",
    "merge",
    "sorted_sections",
]
