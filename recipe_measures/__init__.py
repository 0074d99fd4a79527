"""Recipe Measures - friendly cooking quantities for recipe ingredients."""

__version__ = "1.0.0"

from .formatting import format_cooking_number, pretty_fraction
from .fractions import FractionCandidate, round_fraction, round_to_cooking_fraction
from .recipe import Ingredient, Recipe, RecipeError, load_recipe
from .scaler import update_servings
from .units import DisplayQuantity, normalize_unit

__all__ = [
    "format_cooking_number",
    "pretty_fraction",
    "FractionCandidate",
    "round_fraction",
    "round_to_cooking_fraction",
    "normalize_unit",
    "DisplayQuantity",
    "Recipe",
    "Ingredient",
    "RecipeError",
    "load_recipe",
    "update_servings",
]
