"""Length units. The base unit is the meter."""

from __future__ import annotations

from unitconv.core.family import Family, FamilyId, Unit


def family() -> Family:
    return Family(
        id=FamilyId.LENGTHS,
        base_unit="m",
        units=(
            # metric
            Unit(("meter", "meters"), "m", 1.0),
            Unit(("centimeter", "centimeters"), "cm", 1.0 / 100.0),
            Unit(("millimeter", "millimeters"), "mm", 1.0 / 1000.0),
            Unit(("kilometer", "kilometers"), "km", 1000.0),
            # imperial
            Unit(("foot", "feet"), "ft", 0.3048),
            Unit(("inch", "inches"), "in", 0.0254),
            Unit(("yard", "yards"), "yd", 0.9144),
            Unit(("mile", "miles"), "mi", 1609.344),
            Unit(("nautical mile", "nautical miles"), "nmi", 1852.0),
        ),
    )
