"""Snapping fractional parts onto a small set of cooking-friendly fractions."""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FractionCandidate:
    """A fraction we are willing to show, with its display label."""

    value: float
    label: str


# Fractions used when rendering an arbitrary decimal
DISPLAY_CANDIDATES: tuple[FractionCandidate, ...] = (
    FractionCandidate(1 / 4, "1/4"),
    FractionCandidate(1 / 3, "1/3"),
    FractionCandidate(1 / 2, "1/2"),
    FractionCandidate(2 / 3, "2/3"),
    FractionCandidate(3 / 4, "3/4"),
)

# Fractions used when snapping a rescaled serving quantity (may collapse to 0 or 1)
COOKING_CANDIDATES: tuple[FractionCandidate, ...] = (
    FractionCandidate(0.0, "0"),
    *DISPLAY_CANDIDATES,
    FractionCandidate(1.0, "1"),
)


def round_fraction(
    frac: float, candidates: Sequence[FractionCandidate] = DISPLAY_CANDIDATES
) -> FractionCandidate:
    """
    Find the candidate closest to a fractional part.

    Args:
        frac: Fractional part, expected in [0, 1). Not validated.
        candidates: Ordered candidates; on an exact tie the earlier one wins.

    Returns:
        The nearest FractionCandidate

    Raises:
        ValueError: If candidates is empty
    """
    if not candidates:
        raise ValueError("At least one fraction candidate is required")

    # min() keeps the first of equal keys
    return min(candidates, key=lambda candidate: abs(frac - candidate.value))


def round_to_cooking_fraction(value: float) -> float:
    """
    Round a value to the nearest cooking-friendly amount.

    Examples:
        0.333 -> 1/3
        1.27 -> 1.25
        2.9 -> 3.0
    """
    if value == 0:
        return 0.0

    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    whole = math.trunc(magnitude)
    frac = magnitude - whole

    best = round_fraction(frac, COOKING_CANDIDATES)

    # Snapping to 1 rolls over into the whole part
    if best.value == 1:
        return float(sign * (whole + 1))

    return sign * (whole + best.value)
