"""Recipe and ingredient data as delivered by the recipe API."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .units import DisplayQuantity, normalize_unit

logger = logging.getLogger(__name__)


class RecipeError(Exception):
    """Raised when a recipe document cannot be loaded."""


@dataclass
class Ingredient:
    """A single ingredient line."""

    description: str
    quantity: float | str | None = None  # API data may carry text like "1.5"
    unit: str = ""

    def display(self) -> DisplayQuantity:
        """Return the quantity and unit as they should be shown."""
        return normalize_unit(self.quantity, self.unit)

    def __str__(self) -> str:
        parts = []
        shown = str(self.display())
        if shown:
            parts.append(shown)
        parts.append(self.description)
        return " ".join(parts)


@dataclass
class Recipe:
    """A recipe with its ingredients."""

    id: str
    title: str
    publisher: str = ""
    source_url: str = ""
    image_url: str = ""
    servings: int | None = None
    cooking_time: int | None = None
    ingredients: list[Ingredient] = field(default_factory=list)
    key: str | None = None  # Only set on user-uploaded recipes

    @property
    def user_generated(self) -> bool:
        return bool(self.key)

    def to_dict(self) -> dict[str, Any]:
        """Convert recipe to dictionary for serialization."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "source_url": self.source_url,
            "image_url": self.image_url,
            "servings": self.servings,
            "cooking_time": self.cooking_time,
            "ingredients": [
                {
                    "quantity": ing.quantity,
                    "unit": ing.unit,
                    "description": ing.description,
                }
                for ing in self.ingredients
            ],
        }
        if self.key:
            data["key"] = self.key
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """Create recipe from dictionary."""
        ingredients = [
            Ingredient(
                description=ing.get("description", ""),
                quantity=ing.get("quantity"),
                unit=ing.get("unit") or "",
            )
            for ing in data.get("ingredients", [])
        ]
        return cls(
            id=str(data["id"]),
            title=data["title"],
            publisher=data.get("publisher", ""),
            source_url=data.get("source_url", ""),
            image_url=data.get("image_url", ""),
            servings=data.get("servings"),
            cooking_time=data.get("cooking_time"),
            ingredients=ingredients,
            key=data.get("key"),
        )


def load_recipe(path: Path | str) -> Recipe:
    """
    Load a recipe from a JSON file.

    Accepts either a bare recipe object or the API response envelope
    ({"data": {"recipe": {...}}}).

    Raises:
        RecipeError: If the file can't be read or doesn't hold a recipe
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RecipeError(f"Failed to read recipe file {path}: {e}") from e

    try:
        if isinstance(data, dict) and "data" in data:
            data = data["data"].get("recipe", data["data"])
        recipe = Recipe.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise RecipeError(f"Invalid recipe data in {path}: {e}") from e

    logger.debug("Loaded recipe %s (%d ingredients)", recipe.id, len(recipe.ingredients))
    return recipe
