"""Aisle and inflection file parsing.

The format is line based::

    # comment
    [produce]
    potatoes
    tomato | tomatoes

    [dairy]
    milk

    egg: dairy

A ``[section]`` header starts an aisle; every item line under it maps each
``|`` separated name to that aisle. A ``name: value`` line maps one name to
one value directly and may appear anywhere.
"""

from collections.abc import Iterator, Mapping

from cooklist.logging_config import get_logger

logger = get_logger(__name__)


class ConfigParseError(Exception):
    """Raised when a config file cannot be parsed."""

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.message = message


class AisleMap(Mapping[str, str]):
    """Read-only, case-insensitive mapping from ingredient name to aisle."""

    def __init__(self, items: Mapping[str, str] | None = None):
        self._items: dict[str, str] = {}
        self._names: dict[str, str] = {}
        for name, aisle in (items or {}).items():
            key = name.casefold()
            self._items[key] = aisle
            self._names[key] = name

    def __getitem__(self, name: str) -> str:
        return self._items[name.casefold()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"AisleMap({dict(zip(self._names.values(), self._items.values()))!r})"


def parse_config(text: str) -> AisleMap:
    """
    Parse aisle/inflection file text.

    Raises:
        ConfigParseError: On an unterminated or empty section header, or an
            item line before any section.
    """
    items: dict[str, str] = {}
    section: str | None = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("["):
            if not line.endswith("]"):
                raise ConfigParseError(line_number, f"unterminated section header {line!r}")
            section = line[1:-1].strip()
            if not section:
                raise ConfigParseError(line_number, "empty section name")
            continue

        if ":" in line:
            name, _, value = line.partition(":")
            name, value = name.strip(), value.strip()
            if not name or not value:
                raise ConfigParseError(line_number, f"expected 'name: value', got {line!r}")
            items[name] = value
            continue

        if section is None:
            raise ConfigParseError(line_number, f"item {line!r} outside of any [section]")

        for name in line.split("|"):
            name = name.strip()
            if name:
                items[name] = section

    logger.debug(f"Parsed config with {len(items)} entries")
    return AisleMap(items)
