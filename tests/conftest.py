"""Shared fixtures for recipe-measures tests."""

import json

import pytest

from recipe_measures.recipe import Ingredient, Recipe


@pytest.fixture
def sample_recipe_data():
    """Recipe data as returned by the recipe API."""
    return {
        "id": "5ed6604591c37cdc054bc886",
        "title": "Spicy Chicken and Pepper Jack Pizza",
        "publisher": "My Baking Addiction",
        "source_url": "http://www.mybakingaddiction.com/spicy-chicken-and-pepper-jack-pizza-recipe/",
        "image_url": "http://forkify-api.herokuapp.com/images/FlatBread21of1a180.jpg",
        "servings": 4,
        "cooking_time": 45,
        "ingredients": [
            {"quantity": 1, "unit": "", "description": "pound pizza dough"},
            {"quantity": 0.5, "unit": "cup", "description": "barbecue sauce"},
            {"quantity": 1.5, "unit": "tbsp", "description": "olive oil"},
            {"quantity": None, "unit": "", "description": "Salt and pepper"},
            {"quantity": 200, "unit": "g", "description": "pepper jack cheese"},
        ],
    }


@pytest.fixture
def sample_recipe(sample_recipe_data):
    """Recipe built from the sample API data."""
    return Recipe.from_dict(sample_recipe_data)


@pytest.fixture
def simple_recipe():
    """A small recipe with easy numbers for scaling."""
    return Recipe(
        id="abc123",
        title="Pancakes",
        servings=4,
        ingredients=[
            Ingredient(description="flour", quantity=2.0, unit="cups"),
            Ingredient(description="salt", quantity=0.5, unit="tsp"),
            Ingredient(description="eggs", quantity=3.0),
            Ingredient(description="butter for the pan"),
        ],
    )


@pytest.fixture
def recipe_file(tmp_path, sample_recipe_data):
    """Write the sample recipe to a JSON file wrapped in the API envelope."""
    path = tmp_path / "recipe.json"
    path.write_text(
        json.dumps({"status": "success", "data": {"recipe": sample_recipe_data}}),
        encoding="utf-8",
    )
    return path
