"""Volume unit normalization for cup, tablespoon and teaspoon quantities."""

import logging
import math
from dataclasses import dataclass
from typing import Literal

from .formatting import Quantity, coerce_quantity, format_cooking_number

logger = logging.getLogger(__name__)

UnitClass = Literal["cup", "tbsp", "tsp", "other"]

# Everything is counted in eighths of a teaspoon
EIGHTHS_PER_TSP = 8
EIGHTHS_PER_TBSP = 3 * EIGHTHS_PER_TSP  # 24
EIGHTHS_PER_CUP = 16 * EIGHTHS_PER_TBSP  # 384

EIGHTHS_PER_UNIT: dict[str, int] = {
    "cup": EIGHTHS_PER_CUP,
    "tbsp": EIGHTHS_PER_TBSP,
    "tsp": EIGHTHS_PER_TSP,
}

# Absorbs float noise so exactly one cup stays singular
CUP_PLURAL_THRESHOLD = 1.01

# Smallest amount shown in cups (1/4 cup)
CUP_BAND_MIN = EIGHTHS_PER_CUP // 4

VOLUME_UNIT_ALIASES: dict[str, UnitClass] = {
    "cup": "cup",
    "cups": "cup",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tsp": "tsp",
    "tsps": "tsp",
}


@dataclass(frozen=True)
class DisplaySegment:
    """One "<quantity> <unit>" piece of a displayed amount."""

    quantity: str
    unit: str

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit}"


@dataclass(frozen=True)
class DisplayQuantity:
    """Quantity and unit strings ready to be shown next to an ingredient.

    A compound amount (e.g. tablespoons plus teaspoons) keeps the quantity
    empty and puts the whole phrase in the unit.
    """

    display_quantity: str
    display_unit: str

    @classmethod
    def from_segments(cls, segments: list[DisplaySegment]) -> "DisplayQuantity":
        """Collapse segments into a quantity/unit pair, joining compound amounts into the unit."""
        if not segments:
            return cls("", "")
        if len(segments) == 1:
            return cls(segments[0].quantity, segments[0].unit)
        return cls("", " ".join(str(segment) for segment in segments))

    def __str__(self) -> str:
        return f"{self.display_quantity} {self.display_unit}".strip()


def classify_unit(unit: str | None) -> UnitClass:
    """Classify a unit string as cup, tbsp, tsp or other (case-insensitive)."""
    if not unit:
        return "other"
    return VOLUME_UNIT_ALIASES.get(unit.lower(), "other")


def to_eighths(quantity: float, volume_unit: str) -> int:
    """
    Convert a volume quantity to a whole number of eighth teaspoons.

    Half an eighth rounds up.

    Args:
        quantity: Amount in volume_unit
        volume_unit: "cup", "tbsp" or "tsp"

    Returns:
        Count of 1/8 tsp
    """
    return math.floor(quantity * EIGHTHS_PER_UNIT[volume_unit] + 0.5)


def volume_segments(base: int) -> list[DisplaySegment]:
    """
    Pick display units for an amount given in eighths of a teaspoon.

    Prefers cups from 1/4 cup up, tablespoons (plus leftover teaspoons) from
    1 tbsp up, and teaspoons below that.
    """
    if base <= 0:
        return []

    if base >= CUP_BAND_MIN:
        cups = base / EIGHTHS_PER_CUP
        unit = "cups" if cups > CUP_PLURAL_THRESHOLD else "cup"
        return [DisplaySegment(format_cooking_number(cups), unit)]

    if base >= EIGHTHS_PER_TBSP:
        whole_tbsp, remainder = divmod(base, EIGHTHS_PER_TBSP)
        segments = [DisplaySegment(format_cooking_number(whole_tbsp), "tbsp")]
        if remainder:
            tsp = format_cooking_number(remainder / EIGHTHS_PER_TSP)
            if tsp != "0":
                segments.append(DisplaySegment(tsp, "tsp"))
        return segments

    return [DisplaySegment(format_cooking_number(base / EIGHTHS_PER_TSP), "tsp")]


def normalize_unit(quantity: Quantity, unit: str | None) -> DisplayQuantity:
    """
    Turn a raw quantity and unit into display strings.

    Volume units (cup, tbsp, tsp) are converted to the most readable unit;
    any other unit is passed through with the quantity formatted. Numeric
    strings are read as numbers; other text is shown unchanged.

    Examples:
        (0.25, "cup") -> ("1/4", "cup")
        (1.5, "tbsp") -> ("", "1 tbsp 1 1/2 tsp")
        (5, "g") -> ("5", "g")
        (0, "cup") -> ("", "cup")
        ("a pinch", "") -> ("a pinch", "")
    """
    if not quantity:
        return DisplayQuantity("", unit or "")

    number = coerce_quantity(quantity)
    if number is None:
        # Text like "a pinch" is shown as-is; NaN and infinity count as no quantity
        if isinstance(quantity, str):
            return DisplayQuantity(format_cooking_number(quantity), unit or "")
        return DisplayQuantity("", unit or "")

    if number <= 0:
        return DisplayQuantity("", unit or "")

    if not unit:
        return DisplayQuantity(format_cooking_number(quantity), "")

    unit_class = classify_unit(unit)
    if unit_class == "other":
        return DisplayQuantity(format_cooking_number(quantity), unit)

    base = to_eighths(number, unit_class)
    segments = volume_segments(base)
    logger.debug(
        "Normalized %s %s to %d eighths -> %s",
        quantity,
        unit,
        base,
        [str(segment) for segment in segments],
    )
    return DisplayQuantity.from_segments(segments)
