"""Parse and convert endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from unitconv.api.deps import get_registry
from unitconv.core.converter import convert
from unitconv.core.errors import (
    ConversionTargetError,
    ParseError,
    UnitError,
    UnknownUnitError,
)
from unitconv.core.registry import Registry
from unitconv.core.value import display, parse
from unitconv.models.schemas import (
    ConvertRequest,
    ConvertResponse,
    ParseRequest,
    ValueResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])

_ERROR_KINDS = {
    ParseError: "parse",
    UnknownUnitError: "unknown_unit",
    ConversionTargetError: "conversion_target",
}


def _unprocessable(err: UnitError) -> HTTPException:
    kind = _ERROR_KINDS.get(type(err), "conversion")
    return HTTPException(status_code=422, detail=[{"message": str(err), "kind": kind}])


@router.post("/parse", response_model=ValueResponse)
async def parse_value(req: ParseRequest):
    """Parse a value such as "100c" without converting it."""
    try:
        value = parse(req.value)
    except ParseError as e:
        logger.debug("Rejected value %r: %s", req.value, e)
        raise _unprocessable(e)

    return ValueResponse(quantity=value.quantity, unit=value.unit, display=display(value))


@router.post("/convert", response_model=ConvertResponse)
async def convert_value(req: ConvertRequest, registry: Registry = Depends(get_registry)):
    """Parse a value and convert it into the requested unit."""
    try:
        value = parse(req.value)
        result = convert(registry, value, req.to)
    except UnitError as e:
        logger.debug("Conversion of %r to %r failed: %s", req.value, req.to, e)
        raise _unprocessable(e)

    fam = registry.family_for(value.unit)
    return ConvertResponse(
        quantity=result.quantity,
        unit=result.unit,
        display=display(result),
        family=fam.label,
    )
