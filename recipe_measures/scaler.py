"""Recipe scaling to a new number of servings."""

import logging
from dataclasses import replace

from .config import DEFAULT_SERVINGS_ENV
from .formatting import Quantity, coerce_quantity
from .fractions import round_to_cooking_fraction
from .recipe import Ingredient, Recipe

logger = logging.getLogger(__name__)

SCALE_NAMES: dict[float, str] = {
    2.0: "Doubled",
    0.5: "Halved",
    3.0: "Tripled",
}


def calculate_scale_factor(original_servings: int | None, target_servings: int) -> float:
    """
    Calculate the factor that turns original_servings into target_servings.

    Raises:
        ValueError: If the original serving size is unknown or not positive
    """
    if not original_servings or original_servings <= 0:
        raise ValueError(
            "Cannot scale by servings: original serving size unknown. "
            f"Set {DEFAULT_SERVINGS_ENV} to give recipes without one a serving size."
        )
    return target_servings / original_servings


def scale_quantity(quantity: Quantity, scale_factor: float) -> Quantity:
    """
    Scale a quantity by the given factor.

    Args:
        quantity: Number, numeric string, free text or None
        scale_factor: Factor to multiply by

    Returns:
        The scaled number; None and non-numeric text come back unchanged
    """
    number = coerce_quantity(quantity)
    if number is None:
        return quantity
    return number * scale_factor


def scale_ingredient(
    ingredient: Ingredient, scale_factor: float, round_to_cooking: bool = True
) -> Ingredient:
    """Return a copy of the ingredient with its quantity scaled (and optionally snapped)."""
    scaled = scale_quantity(ingredient.quantity, scale_factor)
    if round_to_cooking and isinstance(scaled, float):
        scaled = round_to_cooking_fraction(scaled)
    return replace(ingredient, quantity=scaled)


def update_servings(recipe: Recipe, new_servings: int, round_to_cooking: bool = True) -> Recipe:
    """
    Return a copy of the recipe scaled to a new number of servings.

    Args:
        recipe: The recipe to scale (left untouched)
        new_servings: Desired serving size, must be positive
        round_to_cooking: Snap quantities to cooking-friendly fractions

    Returns:
        New Recipe with scaled ingredient quantities and servings

    Raises:
        ValueError: If new_servings is not positive or the recipe has no servings
    """
    if new_servings <= 0:
        raise ValueError(f"Servings must be positive, got {new_servings}")

    scale_factor = calculate_scale_factor(recipe.servings, new_servings)
    logger.debug(
        "Scaling recipe %s from %s to %d servings (x%.3f)",
        recipe.id,
        recipe.servings,
        new_servings,
        scale_factor,
    )

    return replace(
        recipe,
        servings=new_servings,
        ingredients=[
            scale_ingredient(ing, scale_factor, round_to_cooking) for ing in recipe.ingredients
        ],
    )


def format_scale_info(original_servings: int, new_servings: int) -> str:
    """Describe a serving change, e.g. "Doubled (4 → 8 servings)"."""
    if original_servings == new_servings:
        return f"Original recipe ({original_servings} servings)"

    scale_factor = new_servings / original_servings
    desc = SCALE_NAMES.get(scale_factor, f"Scaled {scale_factor:.2g}x")
    return f"{desc} ({original_servings} → {new_servings} servings)"
