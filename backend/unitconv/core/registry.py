"""The read-only collection of known unit families."""

from __future__ import annotations

from dataclasses import dataclass

from unitconv.core.families import length, temperature
from unitconv.core.family import Family, FamilyId, Unit


@dataclass(frozen=True)
class Registry:
    families: tuple[Family, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "families", tuple(self.families))
        ids = [f.id for f in self.families]
        if len(ids) != len(set(ids)):
            raise ValueError("A family can only be registered once")

    def family_for(self, token: str) -> Family | None:
        """Return the first family that knows ``token``."""
        for fam in self.families:
            if fam.can_convert(token):
                return fam
        return None

    def get(self, family_id: FamilyId) -> Family:
        for fam in self.families:
            if fam.id == family_id:
                return fam
        raise KeyError(family_id)

    def units(self) -> dict[str, list[Unit]]:
        """Units keyed by family label, in registration order."""
        return {fam.label: list(fam.units) for fam in self.families}


def build_registry() -> Registry:
    """Build the registry holding every built-in family."""
    return Registry(families=(length.family(), temperature.family()))
