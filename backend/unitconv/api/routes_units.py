"""Units endpoint: lists every family and its members."""

from fastapi import APIRouter, Depends

from unitconv.api.deps import get_registry
from unitconv.core.registry import Registry
from unitconv.models.schemas import FamilyResponse, UnitResponse

router = APIRouter(tags=["units"])


@router.get("/units", response_model=list[FamilyResponse])
async def list_units(registry: Registry = Depends(get_registry)):
    return [
        FamilyResponse(
            id=fam.label,
            base_unit=fam.base_unit,
            units=[
                UnitResponse(
                    symbol=u.symbol,
                    name=u.name,
                    names=list(u.names),
                    ratio=u.ratio,
                    difference=u.difference,
                )
                for u in fam.units
            ],
        )
        for fam in registry.families
    ]
