"""Tests for the CLI module."""

import json

import pytest
from click.testing import CliRunner

from recipe_measures.cli import cli


@pytest.fixture
def runner():
    """Create a CLI runner for testing."""
    return CliRunner()


# ============================================================================
# Main CLI Tests
# ============================================================================


class TestMainCli:
    """Tests for the main CLI group."""

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "cooking measurements" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


# ============================================================================
# Quantity Command Tests
# ============================================================================


class TestFormatCommand:
    """Tests for the format command."""

    def test_cooking_style(self, runner):
        result = runner.invoke(cli, ["format", "0.333"])
        assert result.exit_code == 0
        assert result.output.strip() == "1/3"

    def test_negative_value(self, runner):
        result = runner.invoke(cli, ["format", "-0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "-1/2"

    def test_pretty_style(self, runner):
        result = runner.invoke(cli, ["format", "1.125", "--style", "pretty"])
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_non_numeric_passes_through(self, runner):
        result = runner.invoke(cli, ["format", "handful"])
        assert result.exit_code == 0
        assert result.output.strip() == "handful"


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_compound_volume(self, runner):
        result = runner.invoke(cli, ["normalize", "1.5", "tbsp"])
        assert result.exit_code == 0
        assert result.output.strip() == "1 tbsp 1 1/2 tsp"

    def test_cups(self, runner):
        result = runner.invoke(cli, ["normalize", "0.25", "cup"])
        assert result.exit_code == 0
        assert result.output.strip() == "1/4 cup"

    def test_opaque_unit(self, runner):
        result = runner.invoke(cli, ["normalize", "5", "g"])
        assert result.exit_code == 0
        assert result.output.strip() == "5 g"

    def test_no_unit(self, runner):
        result = runner.invoke(cli, ["normalize", "2.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "2 1/2"

    def test_invalid_quantity(self, runner):
        result = runner.invoke(cli, ["normalize", "lots", "cup"])
        assert result.exit_code != 0


# ============================================================================
# Recipe Command Tests
# ============================================================================


class TestShowCommand:
    """Tests for the show command."""

    def test_show_recipe(self, runner, recipe_file):
        result = runner.invoke(cli, ["show", str(recipe_file)])
        assert result.exit_code == 0
        assert "Spicy Chicken and Pepper Jack Pizza" in result.output
        assert "Servings: 4" in result.output
        assert "1/2 cup barbecue sauce" in result.output
        assert "1 tbsp 1 1/2 tsp olive oil" in result.output
        assert "Scaling:" not in result.output

    def test_show_scaled(self, runner, recipe_file):
        result = runner.invoke(cli, ["show", str(recipe_file), "--servings", "2"])
        assert result.exit_code == 0
        assert "Servings: 2" in result.output
        assert "Halved (4 → 2 servings)" in result.output
        assert "1/4 cup barbecue sauce" in result.output
        assert "2 1/4 tsp olive oil" in result.output

    def test_show_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["show", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Failed to read recipe file" in result.output

    def test_show_invalid_servings(self, runner, recipe_file):
        result = runner.invoke(cli, ["show", str(recipe_file), "--servings", "0"])
        assert result.exit_code == 1
        assert "Servings must be positive" in result.output

    def test_show_scaled_without_servings(self, runner, tmp_path, monkeypatch):
        monkeypatch.delenv("RECIPE_MEASURES_DEFAULT_SERVINGS", raising=False)
        path = tmp_path / "recipe.json"
        path.write_text(
            json.dumps(
                {
                    "id": "1",
                    "title": "Soup",
                    "ingredients": [{"quantity": 1, "unit": "cup", "description": "stock"}],
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["show", str(path), "--servings", "2"])
        assert result.exit_code == 1
        assert "original serving size unknown" in result.output

    def test_show_uses_default_servings(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("RECIPE_MEASURES_DEFAULT_SERVINGS", "2")
        path = tmp_path / "recipe.json"
        path.write_text(
            json.dumps(
                {
                    "id": "1",
                    "title": "Soup",
                    "ingredients": [{"quantity": 1, "unit": "cup", "description": "stock"}],
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["show", str(path), "--servings", "4"])
        assert result.exit_code == 0
        assert "Doubled (2 → 4 servings)" in result.output
        assert "2 cups stock" in result.output

    def test_show_text_quantities(self, runner, tmp_path):
        path = tmp_path / "recipe.json"
        path.write_text(
            json.dumps(
                {
                    "id": "1",
                    "title": "Soup",
                    "servings": 2,
                    "ingredients": [
                        {"quantity": "1.5", "unit": "tbsp", "description": "oil"},
                        {"quantity": "a pinch", "unit": "", "description": "salt"},
                    ],
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["show", str(path)])
        assert result.exit_code == 0
        assert "1 tbsp 1 1/2 tsp oil" in result.output
        assert "a pinch salt" in result.output

        result = runner.invoke(cli, ["show", str(path), "--servings", "4"])
        assert result.exit_code == 0
        assert "3 tbsp oil" in result.output
        assert "a pinch salt" in result.output

    def test_show_malformed_envelope(self, runner, tmp_path):
        path = tmp_path / "recipe.json"
        path.write_text(json.dumps({"data": []}), encoding="utf-8")
        result = runner.invoke(cli, ["show", str(path)])
        assert result.exit_code == 1
        assert "Invalid recipe data" in result.output
