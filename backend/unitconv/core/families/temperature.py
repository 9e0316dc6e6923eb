"""Temperature units. The base unit is the kelvin.

Celsius and Fahrenheit are offset scales, so they carry a difference that is
added before scaling toward kelvin.
"""

from __future__ import annotations

from unitconv.core.family import Family, FamilyId, Unit


def family() -> Family:
    return Family(
        id=FamilyId.TEMPERATURE,
        base_unit="k",
        units=(
            Unit(("kelvin", "kelvins"), "k", 1.0, 0.0),
            Unit(("celsius",), "c", 1.0, 273.15),
            Unit(("fahrenheit",), "f", 5.0 / 9.0, 459.67),
            Unit(("rankine",), "r", 5.0 / 9.0, 0.0),
        ),
    )
