"""Recipe data model: amounts, ingredient tables, steps and cookware."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

AMOUNT_SEPARATOR = ", "
DEFAULT_QUANTITY = "some"


def format_number(value: float) -> str:
    """Render a float without trailing zeros, at most two decimals."""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class Amount:
    """A quantity with an optional unit, as produced by the recipe parser."""

    quantity: float | str | None = None
    unit: str | None = None

    def describe(self) -> str:
        """Human-readable rendering, e.g. '200 g' or 'some'."""
        if self.quantity is None or self.quantity == "":
            text = DEFAULT_QUANTITY
        elif isinstance(self.quantity, (int, float)):
            text = format_number(float(self.quantity))
        else:
            text = self.quantity

        if self.unit:
            return f"{text} {self.unit}"
        return text

    def __str__(self) -> str:
        return self.describe()


def describe_amounts(amounts: Iterable[Amount]) -> str:
    """Render an amount collection in collection order."""
    return AMOUNT_SEPARATOR.join(amount.describe() for amount in amounts)


class IngredientTable:
    """Ordered mapping from ingredient name to the amounts collected for it.

    Names are case-sensitive keys. Amounts are only ever appended, so nothing
    added to a table is lost.
    """

    def __init__(self, items: Iterable[tuple[str, Iterable[Amount]]] | None = None):
        self._ingredients: dict[str, list[Amount]] = {}
        for name, amounts in items or ():
            self.add(name, amounts)

    def add(self, name: str, amounts: Amount | Iterable[Amount]) -> None:
        """Append amounts under name, inserting name at the end if new."""
        if isinstance(amounts, Amount):
            amounts = [amounts]
        collected = list(amounts)
        if not collected:
            raise ValueError(f"ingredient {name!r} needs at least one amount")
        self._ingredients.setdefault(name, []).extend(collected)

    def describe(self, name: str) -> str:
        """Render the amounts collected for name."""
        return describe_amounts(self._ingredients[name])

    def names(self) -> list[str]:
        return list(self._ingredients)

    def items(self) -> Iterator[tuple[str, list[Amount]]]:
        """Iterate (name, amounts) pairs in insertion order.

        The amount lists are copies; mutating them does not touch the table.
        """
        for name, amounts in self._ingredients.items():
            yield name, list(amounts)

    def copy(self) -> "IngredientTable":
        return IngredientTable(self.items())

    def __getitem__(self, name: str) -> list[Amount]:
        return list(self._ingredients[name])

    def __contains__(self, name: object) -> bool:
        return name in self._ingredients

    def __iter__(self) -> Iterator[str]:
        return iter(self._ingredients)

    def __len__(self) -> int:
        return len(self._ingredients)

    def __bool__(self) -> bool:
        return bool(self._ingredients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IngredientTable):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        body = "; ".join(f"{name}: {self.describe(name)}" for name in self._ingredients)
        return f"IngredientTable({body})"


@dataclass(frozen=True)
class Direction:
    """One fragment of a step: plain text, ingredient, cookware or timer."""

    text: str
    kind: str = "text"  # "text", "ingredient", "cookware", "timer"

    @property
    def description(self) -> str:
        return self.text


@dataclass(frozen=True)
class Cookware:
    """A piece of equipment referenced by a recipe."""

    name: str


@dataclass
class Step:
    """A single recipe step."""

    directions: list[Direction] = field(default_factory=list)
    ingredients: IngredientTable = field(default_factory=IngredientTable)

    @property
    def description(self) -> str:
        """Direction fragments concatenated with no separator."""
        return "".join(direction.description for direction in self.directions)


@dataclass
class Recipe:
    """A parsed recipe."""

    metadata: dict[str, str] = field(default_factory=dict)
    ingredients: IngredientTable = field(default_factory=IngredientTable)
    cookware: list[Cookware] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    source: Path | None = None

    @property
    def title(self) -> str | None:
        """Recipe title from metadata, or the file stem."""
        if title := self.metadata.get("title"):
            return title
        if self.source is not None:
            return self.source.stem
        return None
