# planning/validation.py — Boundary checks for form-supplied values
#
# Form fields arrive as loosely typed values ("5000", 5000, 5e3, "").
# Everything is converted and checked here, before a record is built,
# so the calculators only ever see clean numbers.

import math
from typing import Optional


class InvalidInputError(ValueError):
    """A precondition on user input was violated."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


# ─────────────────────────────────────────────────────────────────────────────
# PARSERS
# ─────────────────────────────────────────────────────────────────────────────

def parse_amount(
    field: str,
    value,
    minimum: Optional[float] = 0.0,
    strictly_positive: bool = False,
) -> float:
    """
    Convert a form value to float and range-check it.

    minimum=None disables the lower bound (net worth can be negative).
    """
    if isinstance(value, bool):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if value.startswith("$"):
            value = value[1:]
        if not value:
            raise InvalidInputError(field, "value is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f"expected a number, got {value!r}") from None

    if not math.isfinite(number):
        raise InvalidInputError(field, "must be a finite number")
    if strictly_positive and number <= 0:
        raise InvalidInputError(field, f"must be greater than 0, got {number:g}")
    if minimum is not None and number < minimum:
        raise InvalidInputError(field, f"must be at least {minimum:g}, got {number:g}")
    return number


def parse_int(
    field: str,
    value,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """Convert to int; fractional values are rejected rather than truncated."""
    number = parse_amount(field, value, minimum=None)
    if not number.is_integer():
        raise InvalidInputError(field, f"must be a whole number, got {number:g}")
    number = int(number)
    if minimum is not None and number < minimum:
        raise InvalidInputError(field, f"must be at least {minimum}, got {number}")
    if maximum is not None and number > maximum:
        raise InvalidInputError(field, f"must be at most {maximum}, got {number}")
    return number


def parse_choice(field: str, value, choices) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(field, f"expected one of {list(choices)}, got {value!r}")
    normalised = value.strip().lower()
    if normalised not in choices:
        raise InvalidInputError(field, f"expected one of {list(choices)}, got {value!r}")
    return normalised


def parse_text(field: str, value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidInputError(field, f"expected text, got {value!r}")
    return value.strip()
