"""Convert scalar measurements between units of the same family."""

from unitconv.core.converter import convert, list_families
from unitconv.core.errors import (
    ConversionError,
    ConversionTargetError,
    ParseError,
    UnitError,
    UnknownUnitError,
)
from unitconv.core.family import Family, FamilyId, Unit
from unitconv.core.registry import Registry, build_registry
from unitconv.core.value import Value, display, parse

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionTargetError",
    "Family",
    "FamilyId",
    "ParseError",
    "Registry",
    "Unit",
    "UnitError",
    "UnknownUnitError",
    "Value",
    "build_registry",
    "convert",
    "display",
    "list_families",
    "parse",
]
