"""Units, families of mutually convertible units, and the conversion math.

A unit converts to its family's base unit with

    base = (quantity + unit.difference) * unit.ratio

and back from the base unit with

    quantity = base * (1.0 / unit.ratio) - unit.difference
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from unitconv.core.errors import ConversionTargetError, UnknownUnitError
from unitconv.core.value import Value


class FamilyId(Enum):
    LENGTHS = "Lengths"
    TEMPERATURE = "Temperature"


@dataclass(frozen=True)
class Unit:
    names: tuple[str, ...]
    symbol: str
    ratio: float
    difference: float = 0.0

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError(f"Unit '{self.symbol}' needs at least one name")
        if self.ratio == 0:
            raise ValueError(f"Unit '{self.symbol}' has a zero ratio")
        object.__setattr__(self, "names", tuple(n.lower() for n in self.names))
        object.__setattr__(self, "symbol", self.symbol.lower())

    @property
    def name(self) -> str:
        """Canonical singular name."""
        return self.names[0]

    def tokens(self) -> tuple[str, ...]:
        return (*self.names, self.symbol)


@dataclass(frozen=True)
class Family:
    id: FamilyId
    base_unit: str
    units: tuple[Unit, ...]
    _lookup: dict[str, Unit] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_unit", self.base_unit.lower())
        object.__setattr__(self, "units", tuple(self.units))

        lookup: dict[str, Unit] = {}
        for unit in self.units:
            for token in unit.tokens():
                if token in lookup and lookup[token] is not unit:
                    raise ValueError(f"Token '{token}' is used twice in {self.id.value}")
                lookup[token] = unit
        object.__setattr__(self, "_lookup", lookup)

        base_matches = [u for u in self.units if u.symbol == self.base_unit]
        if len(base_matches) != 1:
            raise ValueError(
                f"Base unit '{self.base_unit}' must match exactly one unit symbol in {self.id.value}"
            )

    @property
    def label(self) -> str:
        return self.id.value

    def find_unit(self, token: str) -> Unit | None:
        """Case-insensitive lookup by any name or the symbol."""
        return self._lookup.get(token.lower())

    def can_convert(self, token: str) -> bool:
        return self.find_unit(token) is not None

    def convert(self, value: Value, to_unit: str) -> Value:
        """Convert ``value`` into ``to_unit`` by way of the base unit."""
        if value.unit == to_unit:
            return value

        base_quantity = value.quantity
        if value.unit != self.base_unit:
            base_quantity = self.to_base_unit(value).quantity

        return self.to_dest_unit(base_quantity, to_unit)

    def to_base_unit(self, value: Value) -> Value:
        unit = self.find_unit(value.unit)
        if unit is None:
            raise UnknownUnitError(value.unit)
        return Value((value.quantity + unit.difference) * unit.ratio, self.base_unit)

    def to_dest_unit(self, base_quantity: float, to_unit: str) -> Value:
        unit = self.find_unit(to_unit)
        if unit is None:
            raise ConversionTargetError(self.base_unit, to_unit)
        return Value(base_quantity * (1.0 / unit.ratio) - unit.difference, to_unit)
