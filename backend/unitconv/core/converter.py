"""Conversion entry points used by the API and the command line."""

from __future__ import annotations

from unitconv.core.errors import UnknownUnitError
from unitconv.core.family import Unit
from unitconv.core.registry import Registry
from unitconv.core.value import Value


def convert(registry: Registry, value: Value, to_unit: str) -> Value:
    """Convert ``value`` into ``to_unit`` within the family that owns its unit.

    Raises UnknownUnitError when no family knows the value's unit and
    ConversionTargetError when that family has no ``to_unit``.
    """
    fam = registry.family_for(value.unit)
    if fam is None:
        raise UnknownUnitError(value.unit)
    return fam.convert(value, to_unit)


def list_families(registry: Registry) -> dict[str, list[Unit]]:
    return registry.units()
