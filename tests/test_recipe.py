"""Tests for the recipe model, the Cooklang reader and the file adapter."""

import pytest

from conftest import amount, described, make_table
from cooklist.errors import RecipeUnparsable, RecipeUnreadable
from cooklist.recipe import (
    Amount,
    IngredientTable,
    Recipe,
    RecipeParseError,
    load_ingredients,
    load_recipe,
    load_recipes,
    parse_amount,
    parse_quantity,
    parse_recipe,
)

# =============================================================================
# Amounts and ingredient tables
# =============================================================================


class TestAmount:
    """Tests for Amount.describe()."""

    def test_number_with_unit(self):
        assert Amount(200.0, "g").describe() == "200 g"

    def test_number_without_trailing_zeros(self):
        """Whole numbers lose their decimals, fractions keep at most two."""
        assert Amount(3.0).describe() == "3"
        assert Amount(0.5).describe() == "0.5"
        assert Amount(1 / 3, "cup").describe() == "0.33 cup"

    def test_missing_quantity(self):
        """No quantity reads as 'some'."""
        assert Amount().describe() == "some"
        assert Amount(None, "g").describe() == "some g"
        assert Amount("").describe() == "some"

    def test_text_quantity(self):
        assert Amount("a pinch").describe() == "a pinch"

    def test_str(self):
        assert str(Amount(2.0, "tbsp")) == "2 tbsp"


class TestIngredientTable:
    """Tests for IngredientTable."""

    def test_add_keeps_insertion_order(self):
        table = IngredientTable()
        table.add("salt", amount("1 tsp"))
        table.add("flour", amount("200 g"))
        table.add("salt", amount("2 tsp"))

        assert table.names() == ["salt", "flour"]
        assert table.describe("salt") == "1 tsp, 2 tsp"

    def test_add_empty_collection_rejected(self):
        """Every name holds at least one amount."""
        with pytest.raises(ValueError):
            IngredientTable().add("salt", [])

    def test_accessors_return_copies(self):
        """Lists handed out do not alias the table's storage."""
        table = make_table(("flour", ["200 g"]))

        table["flour"].append(amount("1 kg"))
        for _, amounts in table.items():
            amounts.clear()

        assert described(table) == {"flour": ["200 g"]}

    def test_copy_is_independent(self):
        table = make_table(("flour", ["200 g"]))
        copied = table.copy()
        copied.add("flour", amount("100 g"))

        assert described(table) == {"flour": ["200 g"]}
        assert copied == make_table(("flour", ["200 g", "100 g"]))

    def test_container_protocol(self):
        table = make_table(("flour", ["200 g"]), ("salt", ["1 tsp"]))

        assert "flour" in table
        assert "Flour" not in table
        assert list(table) == ["flour", "salt"]
        assert len(table) == 2
        assert table
        assert not IngredientTable()

    def test_equality_depends_on_order(self):
        assert make_table(("a", ["1"]), ("b", ["2"])) != make_table(("b", ["2"]), ("a", ["1"]))


# =============================================================================
# Cooklang reader
# =============================================================================


class TestParseQuantity:
    """Tests for parse_quantity() and parse_amount()."""

    def test_numbers(self):
        assert parse_quantity("2") == 2.0
        assert parse_quantity("1.5") == 1.5

    def test_fractions(self):
        assert parse_quantity("1/2") == 0.5
        assert parse_quantity("1 1/2") == 1.5

    def test_zero_denominator_kept_as_text(self):
        assert parse_quantity("1/0") == "1/0"

    def test_text_and_empty(self):
        assert parse_quantity("a pinch") == "a pinch"
        assert parse_quantity("  ") is None

    def test_parse_amount(self):
        assert parse_amount("125%g") == Amount(125.0, "g")
        assert parse_amount("3") == Amount(3.0, None)
        assert parse_amount("") == Amount(None, None)

    def test_parse_amount_scaling_marker_dropped(self):
        assert parse_amount("2*%cups") == Amount(2.0, "cups")


class TestParseRecipe:
    """Tests for the Cooklang reader."""

    def test_pancakes(self, pancakes_file):
        """Metadata, ingredients, cookware and steps are extracted."""
        recipe = parse_recipe(pancakes_file.read_text(encoding="utf-8"))

        assert recipe.metadata == {"servings": "2"}
        assert described(recipe.ingredients) == {
            "eggs": ["3"],
            "plain flour": ["125 g"],
            "milk": ["250 ml"],
            "lemon": ["0.5"],
            "sugar": ["some"],
        }
        assert [c.name for c in recipe.cookware] == ["bowl", "frying pan"]
        assert [s.description for s in recipe.steps] == [
            "Crack eggs into a bowl.",
            "Add plain flour and milk, then whisk.",
            "Cook in a frying pan for 2 minutes per side.",
            "Serve with lemon and sugar.",
        ]

    def test_step_ingredients(self, pancakes_file):
        """Each step carries the ingredients it uses."""
        recipe = parse_recipe(pancakes_file.read_text(encoding="utf-8"))

        assert [described(s.ingredients) for s in recipe.steps] == [
            {"eggs": ["3"]},
            {"plain flour": ["125 g"], "milk": ["250 ml"]},
            {},
            {"lemon": ["0.5"], "sugar": ["some"]},
        ]

    def test_repeated_ingredient_collects_amounts(self):
        recipe = parse_recipe("Add @salt{1%tsp}.\nTaste and add @salt{1%pinch}.\n")

        assert described(recipe.ingredients) == {"salt": ["1 tsp", "1 pinch"]}

    def test_literal_sigils(self):
        """A sigil followed by nothing usable stays in the text."""
        recipe = parse_recipe("Bake at 180 # for 20 min @ home.\n")

        assert recipe.steps[0].description == "Bake at 180 # for 20 min @ home."
        assert not recipe.ingredients

    def test_unterminated_brace(self):
        with pytest.raises(RecipeParseError) as exc_info:
            parse_recipe("Line one.\nAdd @flour{200%g and stir.\n")

        assert exc_info.value.line == 2
        assert "unterminated" in str(exc_info.value)

    def test_unterminated_block_comment(self):
        with pytest.raises(RecipeParseError):
            parse_recipe("Mix @flour. [- never closed\n")

    def test_metadata_without_key(self):
        with pytest.raises(RecipeParseError):
            parse_recipe(">> : value\n")


# =============================================================================
# Recipe adapter
# =============================================================================


class TestLoadRecipe:
    """Tests for load_recipe() and load_ingredients()."""

    def test_load(self, pancakes_file):
        recipe = load_recipe(pancakes_file)

        assert recipe.source == pancakes_file
        assert recipe.title == "pancakes"
        assert list(load_ingredients(pancakes_file)) == [
            "eggs",
            "plain flour",
            "milk",
            "lemon",
            "sugar",
        ]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.cook"

        with pytest.raises(RecipeUnreadable) as exc_info:
            load_recipe(path)

        assert exc_info.value.path == path
        assert exc_info.value.exit_code == 5

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.cook"
        path.write_bytes("Add @cr\xe8me fra\xeeche.\n".encode("latin-1"))

        with pytest.raises(RecipeUnreadable):
            load_recipe(path)

    def test_parse_error(self, write_recipe):
        path = write_recipe("broken.cook", "Add @flour{200%g\n")

        with pytest.raises(RecipeUnparsable) as exc_info:
            load_recipe(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, RecipeParseError)

    def test_custom_parser(self, write_recipe):
        """Any callable from text to Recipe can stand in for the reader."""
        path = write_recipe("any.cook", "ignored")

        def parser(text: str) -> Recipe:
            return Recipe(ingredients=make_table(("water", ["1 l"])))

        assert described(load_recipe(path, parser).ingredients) == {"water": ["1 l"]}

    def test_custom_parser_value_error(self, write_recipe):
        path = write_recipe("any.cook", "ignored")

        def parser(text: str) -> Recipe:
            raise ValueError("nope")

        with pytest.raises(RecipeUnparsable):
            load_recipe(path, parser)

    def test_reads_file_every_time(self, write_recipe):
        path = write_recipe("a.cook", "@salt\n")
        load_recipe(path)
        path.write_text("@pepper\n", encoding="utf-8")

        assert list(load_recipe(path).ingredients) == ["pepper"]


class TestLoadRecipes:
    """Tests for load_recipes()."""

    @pytest.mark.parametrize("workers", [1, 4])
    def test_keeps_input_order(self, write_recipe, workers):
        paths = [write_recipe(f"r{i}.cook", f"@item{i}\n") for i in range(8)]

        recipes = load_recipes(list(reversed(paths)), workers=workers)

        assert [r.source for r in recipes] == list(reversed(paths))
        assert [list(r.ingredients) for r in recipes] == [[f"item{i}"] for i in reversed(range(8))]

    @pytest.mark.parametrize("workers", [1, 4])
    def test_first_failure_in_input_order(self, write_recipe, tmp_path, workers):
        good = write_recipe("good.cook", "@salt\n")
        broken = write_recipe("broken.cook", "@flour{\n")
        missing = tmp_path / "missing.cook"

        with pytest.raises(RecipeUnparsable) as exc_info:
            load_recipes([good, broken, missing], workers=workers)

        assert exc_info.value.path == broken

    def test_empty(self):
        assert load_recipes([]) == []
