"""Group ingredients into aisles."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from cooklist.catalog.aisle import AisleMap
from cooklist.recipe.models import IngredientTable


@dataclass(frozen=True)
class CategoryDefaults:
    """Category names used when an ingredient has no aisle of its own."""

    # every ingredient lands here when there is no aisle config at all
    no_config: str = "INGREDIENTS"
    # ingredients missing from an aisle config
    unmapped: str = "OTHER (add new items into aisle.conf)"


DEFAULT_CATEGORIES = CategoryDefaults()


def category_for(
    name: str,
    aisle_map: Mapping[str, str] | None,
    defaults: CategoryDefaults = DEFAULT_CATEGORIES,
) -> str:
    """Category of a single ingredient; lookup ignores case."""
    if aisle_map is None:
        return defaults.no_config
    aisle = aisle_map.get(name)
    if aisle is None:
        return defaults.unmapped
    return aisle.upper()


def categorize(
    table: IngredientTable,
    aisle_map: Mapping[str, str] | None = None,
    *,
    defaults: CategoryDefaults = DEFAULT_CATEGORIES,
) -> dict[str, IngredientTable]:
    """
    Partition a merged table into categories.

    Every ingredient ends up in exactly one category, and within a category
    ingredients keep the order of the input table. Categories are returned in
    first-seen order; use sorted_sections() for display order.
    """
    if aisle_map is not None and not isinstance(aisle_map, AisleMap):
        aisle_map = AisleMap(aisle_map)

    sections: dict[str, IngredientTable] = {}
    for name, amounts in table.items():
        category = category_for(name, aisle_map, defaults)
        sections.setdefault(category, IngredientTable()).add(name, amounts)
    return sections


def sorted_sections(
    sections: Mapping[str, IngredientTable],
) -> Iterator[tuple[str, IngredientTable]]:
    """Yield sections ordered by category name (code point order)."""
    for category in sorted(sections):
        yield category, sections[category]
