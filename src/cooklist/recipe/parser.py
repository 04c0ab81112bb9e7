"""A small Cooklang reader.

Covers the subset of the markup the shopping list needs:

- ``>> key: value`` metadata lines
- ``-- comment`` and ``[- block comment -]``
- ``@ingredient``, ``@multi word ingredient{qty%unit}``
- ``#cookware``, ``#multi word cookware{}``
- ``~{qty%unit}`` and ``~name{qty%unit}`` timers

Every other non-blank line is one step.
"""

import re

from cooklist.logging_config import get_logger
from cooklist.recipe.models import (
    Amount,
    Cookware,
    Direction,
    IngredientTable,
    Recipe,
    Step,
)

logger = get_logger(__name__)

SIGILS = "@#~"
SIGIL_KINDS = {"@": "ingredient", "#": "cookware", "~": "timer"}

BLOCK_COMMENT_RE = re.compile(r"\[-.*?-\]", re.DOTALL)
LINE_COMMENT_RE = re.compile(r"--.*$")
WORD_RE = re.compile(r"[^\s@#~{}.,;:!?()\[\]\"']+")

MIXED_FRACTION_RE = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)$")
FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$|^\.\d+$")


class RecipeParseError(Exception):
    """Raised when recipe text cannot be parsed."""

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.message = message


# =============================================================================
# Quantities
# =============================================================================


def parse_quantity(text: str) -> float | str | None:
    """
    Parse the quantity part of an amount.

    Handles formats like:
    - "" (no quantity, rendered as "some")
    - "2", "1.5"
    - "1/2"
    - "1 1/2" (one and a half)

    Anything else (e.g. "a pinch") is kept as text.
    """
    text = text.strip()
    if not text:
        return None

    mixed_match = MIXED_FRACTION_RE.match(text)
    if mixed_match:
        whole, num, denom = (int(g) for g in mixed_match.groups())
        if denom:
            return whole + num / denom

    frac_match = FRACTION_RE.match(text)
    if frac_match:
        num, denom = (int(g) for g in frac_match.groups())
        if denom:
            return num / denom

    if NUMBER_RE.match(text):
        return float(text)

    return text


def parse_amount(text: str) -> Amount:
    """Parse the contents of ``{qty%unit}``."""
    quantity, _, unit = text.partition("%")
    quantity = quantity.strip().rstrip("*").strip()
    return Amount(quantity=parse_quantity(quantity), unit=unit.strip() or None)


# =============================================================================
# Parser
# =============================================================================


class RecipeParser:
    """Turns Cooklang text into a Recipe."""

    def parse(self, text: str) -> Recipe:
        recipe = Recipe()

        # keep line numbers stable for error messages
        text = BLOCK_COMMENT_RE.sub(lambda m: "\n" * m.group().count("\n"), text)
        if "[-" in text:
            line = text[: text.index("[-")].count("\n") + 1
            raise RecipeParseError(line, "unterminated block comment")

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            stripped = raw_line.strip()
            if stripped.startswith(">>"):
                key, _, value = stripped[2:].partition(":")
                if not key.strip():
                    raise RecipeParseError(line_number, "metadata line without a key")
                recipe.metadata[key.strip()] = value.strip()
                continue

            line = LINE_COMMENT_RE.sub("", raw_line).strip()
            if not line:
                continue

            step = self._parse_step(line, line_number)
            recipe.steps.append(step)
            for name, amounts in step.ingredients.items():
                recipe.ingredients.add(name, amounts)
            for direction in step.directions:
                if direction.kind == "cookware":
                    recipe.cookware.append(Cookware(name=direction.text))

        logger.debug(
            f"Parsed recipe: {len(recipe.steps)} steps, "
            f"{len(recipe.ingredients)} ingredients, {len(recipe.cookware)} cookware"
        )
        return recipe

    def _parse_step(self, line: str, line_number: int) -> Step:
        step = Step(ingredients=IngredientTable())
        buffer: list[str] = []
        pos = 0

        while pos < len(line):
            char = line[pos]
            if char not in SIGILS:
                buffer.append(char)
                pos += 1
                continue

            token = self._read_token(line, pos, line_number)
            if token is None:
                buffer.append(char)
                pos += 1
                continue

            name, amount_text, end = token
            if buffer:
                step.directions.append(Direction("".join(buffer)))
                buffer = []

            kind = SIGIL_KINDS[char]
            if kind == "ingredient":
                amount = parse_amount(amount_text or "")
                step.ingredients.add(name, amount)
                step.directions.append(Direction(name, kind))
            elif kind == "cookware":
                step.directions.append(Direction(name, kind))
            else:
                step.directions.append(Direction(parse_amount(amount_text or "").describe(), kind))
            pos = end

        if buffer:
            step.directions.append(Direction("".join(buffer)))
        return step

    def _read_token(
        self, line: str, start: int, line_number: int
    ) -> tuple[str, str | None, int] | None:
        """
        Read the component starting at the sigil at ``start``.

        Returns (name, brace contents or None, index after the token), or None
        when the sigil is just a literal character.
        """
        brace = line.find("{", start + 1)
        if brace != -1 and not any(c in SIGILS for c in line[start + 1 : brace]):
            close = line.find("}", brace + 1)
            if close == -1:
                raise RecipeParseError(line_number, f"unterminated '{{' at column {brace + 1}")
            name = line[start + 1 : brace].strip()
            if name or line[start] == "~":
                return name, line[brace + 1 : close], close + 1

        word_match = WORD_RE.match(line, start + 1)
        if word_match is None:
            return None
        return word_match.group(), None, word_match.end()


def parse_recipe(text: str) -> Recipe:
    """Parse Cooklang text with the default parser."""
    return RecipeParser().parse(text)
