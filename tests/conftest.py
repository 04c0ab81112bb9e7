"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from cooklist.config import get_settings
from cooklist.recipe.models import Amount, IngredientTable
from cooklist.recipe.parser import parse_amount


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP app")


# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real ./config and ~/.config/cook."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("COOK_CONFIG_HOME", str(tmp_path / "home-config"))
    monkeypatch.delenv("COOK_RECIPES_DIR", raising=False)
    for name in ("COOK_LOAD_WORKERS", "COOK_LOG_LEVEL", "COOK_LOG_FORMAT", "COOK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # configure_logging() replaces the root handlers
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


# =============================================================================
# Helpers
# =============================================================================


def amount(text: str) -> Amount:
    """Build an Amount from '200 g' style text."""
    quantity, _, unit = text.partition(" ")
    return parse_amount(f"{quantity}%{unit}")


def make_table(*items: tuple[str, list[str]]) -> IngredientTable:
    """Build an IngredientTable from (name, ['200 g', ...]) pairs."""
    return IngredientTable((name, [amount(a) for a in amounts]) for name, amounts in items)


def described(table: IngredientTable) -> dict[str, list[str]]:
    """Table contents as plain strings, in order."""
    return {name: [a.describe() for a in amounts] for name, amounts in table.items()}


# =============================================================================
# Recipe file fixtures
# =============================================================================


PANCAKES = """\
>> servings: 2
-- a comment line
Crack @eggs{3} into a #bowl{}.
Add @plain flour{125%g} and @milk{250%ml}, then whisk.
Cook in a #frying pan{} for ~{2%minutes} per side. [- flip once -]
Serve with @lemon{1/2} and @sugar.
"""


@pytest.fixture
def write_recipe(tmp_path) -> Callable[..., Path]:
    """Factory writing a recipe file below tmp_path/recipes."""
    recipes = tmp_path / "recipes"
    recipes.mkdir(exist_ok=True)

    def _write(name: str, text: str) -> Path:
        path = recipes / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pancakes_file(write_recipe) -> Path:
    return write_recipe("pancakes.cook", PANCAKES)


@pytest.fixture
def bread_and_soup(write_recipe) -> list[Path]:
    """Two recipes sharing flour; the second also uses salt."""
    return [
        write_recipe("bread.cook", "Mix @flour{200%g} with water.\n"),
        write_recipe("soup.cook", "Thicken with @flour{100%g} and season with @salt{1%tsp}.\n"),
    ]


@pytest.fixture
def aisle_file(tmp_path) -> Path:
    path = tmp_path / "aisle.conf"
    path.write_text("[baking]\nflour\n", encoding="utf-8")
    return path
