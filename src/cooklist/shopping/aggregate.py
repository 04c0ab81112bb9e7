"""Merge ingredient tables from several recipes."""

from collections.abc import Iterable

from cooklist.recipe.models import IngredientTable


def merge(tables: Iterable[IngredientTable]) -> IngredientTable:
    """
    Fold ingredient tables left to right into a new table.

    A name keeps the position where it was first seen; amounts from later
    tables are appended to its collection, never replaced, deduplicated or
    added together. The inputs are left untouched.

    The result depends on input order for iteration, not for content:
    ``merge([a, b])`` and ``merge([b, a])`` hold the same (name, amount)
    pairs.
    """
    merged = IngredientTable()
    for table in tables:
        for name, amounts in table.items():
            merged.add(name, amounts)
    return merged
