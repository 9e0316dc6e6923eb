"""Errors raised by the value parser and the conversion engine."""

from __future__ import annotations


class UnitError(Exception):
    """Base class for every failure the core reports."""


class ParseError(UnitError):
    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class ConversionError(UnitError):
    """A parsed value could not be converted."""


class UnknownUnitError(ConversionError):
    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unknown unit: {unit}")


class ConversionTargetError(ConversionError):
    def __init__(self, base_unit: str, unit: str):
        self.base_unit = base_unit
        self.unit = unit
        super().__init__(f"failed to convert from {base_unit} to {unit}")
