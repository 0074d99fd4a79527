"""Number formatting for ingredient quantities."""

import math

from .fractions import DISPLAY_CANDIDATES, round_fraction

# Fractional parts below this count as whole
WHOLE_EPSILON = 1e-6

# Fractional parts within this distance of 0 or 1 fold into the whole number
FOLD_TOLERANCE = 0.125

# Tighter fold used by pretty_fraction
PRETTY_FOLD_TOLERANCE = 0.08

PRETTY_DENOMINATORS = (2, 3, 4)

Quantity = float | int | str | None


def coerce_quantity(value: Quantity) -> float | None:
    """Convert a numeric-like value to a finite float, or None if that fails."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _whole_string(number: float) -> str | None:
    """Return the integer string for number if it is (nearly) whole."""
    if abs(number) % 1 < WHOLE_EPSILON:
        return str(int(math.copysign(round(abs(number)), number)))
    return None


def format_cooking_number(value: Quantity) -> str:
    """
    Format a quantity using whole numbers and 1/4, 1/3, 1/2, 2/3, 3/4.

    Never raises: empty input gives "", and input that is not a finite number
    is returned unchanged as a string.

    Examples:
        0.333 -> "1/3"
        1.5 -> "1 1/2"
        -0.5 -> "-1/2"
        2.95 -> "3"
        "pinch" -> "pinch"
    """
    if value is None or value == "":
        return ""

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    number = coerce_quantity(value)
    if number is None:
        return str(value)

    whole_str = _whole_string(number)
    if whole_str is not None:
        return whole_str

    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    whole = math.trunc(magnitude)
    frac = magnitude - whole

    if frac < FOLD_TOLERANCE:
        return str(sign * whole)

    if 1 - frac < FOLD_TOLERANCE:
        return str(sign * (whole + 1))

    best = round_fraction(frac, DISPLAY_CANDIDATES)
    result = f"{whole} {best.label}" if whole > 0 else best.label

    if sign < 0:
        result = "-" + result
    return result


def pretty_fraction(value: Quantity) -> str:
    """
    Represent a decimal as a mixed fraction with denominator 2, 3 or 4.

    Unlike format_cooking_number this works from denominators rather than a
    fixed list of fractions and folds with a tighter tolerance.

    Examples:
        0.5 -> "1/2"
        2.7 -> "2 2/3"
        1.05 -> "1"
        2.0000001 -> "2.0000001"
    """
    if value is None or value == "":
        return ""

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    number = coerce_quantity(value)
    if number is None:
        return str(value)

    # Nearly whole values are shown as-is, not rounded
    if abs(number) % 1 < WHOLE_EPSILON:
        return str(int(number)) if number.is_integer() else str(number)

    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    whole = math.trunc(magnitude)
    frac = magnitude - whole

    best_num, best_den = 0, 1
    min_diff = math.inf
    for den in PRETTY_DENOMINATORS:
        num = math.floor(frac * den + 0.5)
        diff = abs(frac - num / den)
        if diff < min_diff:
            min_diff = diff
            best_num, best_den = num, den

    if frac < PRETTY_FOLD_TOLERANCE or best_num == 0:
        return str(sign * whole)

    if 1 - frac < PRETTY_FOLD_TOLERANCE or best_num == best_den:
        return str(sign * (whole + 1))

    result = f"{best_num}/{best_den}"
    if whole > 0:
        result = f"{whole} {result}"

    if sign < 0:
        result = "-" + result
    return result
