"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from unitconv.config import settings


def _check_value_text(v: str) -> str:
    if not v.strip():
        raise ValueError("Value cannot be empty")
    if len(v) > settings.max_value_length:
        raise ValueError(f"Value is longer than {settings.max_value_length} characters")
    return v


class ParseRequest(BaseModel):
    value: str

    @field_validator("value")
    @classmethod
    def value_is_usable(cls, v: str) -> str:
        return _check_value_text(v)


class ConvertRequest(BaseModel):
    value: str
    to: str

    @field_validator("value")
    @classmethod
    def value_is_usable(cls, v: str) -> str:
        return _check_value_text(v)

    @field_validator("to")
    @classmethod
    def target_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Target unit cannot be empty")
        return v


class ValueResponse(BaseModel):
    quantity: float
    unit: str
    display: str


class ConvertResponse(ValueResponse):
    family: str


class UnitResponse(BaseModel):
    symbol: str
    name: str
    names: list[str]
    ratio: float
    difference: float


class FamilyResponse(BaseModel):
    id: str
    base_unit: str
    units: list[UnitResponse] = Field(default_factory=list)
