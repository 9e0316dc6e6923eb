"""Scalar values and the text scanner that produces them."""

from __future__ import annotations

import re
from dataclasses import dataclass

from unitconv.core.errors import ParseError

# Sign, integer digits, optional point and fraction. ASCII digits only.
_NUMBER_RE = re.compile(r"\s*(-?[0-9]+\.?[0-9]*)")

# The unit token never contains a lower-case "s".
_EXCLUDED_UNIT_CHAR = "s"


@dataclass(frozen=True)
class Value:
    quantity: float
    unit: str

    def __str__(self) -> str:
        return display(self)


def display(value: Value) -> str:
    """Format a value as the quantity with two decimals followed by its unit."""
    return f"{value.quantity:.2f}{value.unit}"


def parse(text: str) -> Value:
    """Scan ``text`` as a number followed by a unit token.

    The number is read first, the remainder (stripped of surrounding
    whitespace) becomes the unit token, lower-cased.
    """
    m = _NUMBER_RE.match(text)
    if not m:
        raise ParseError("invalid value")

    unit = text[m.end():].strip()
    if not unit or _EXCLUDED_UNIT_CHAR in unit:
        raise ParseError("invalid value")

    try:
        quantity = float(m.group(1))
    except ValueError as e:
        raise ParseError(str(e)) from e

    return Value(quantity=quantity, unit=unit.lower())
