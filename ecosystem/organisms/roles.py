"""
Role-specific organisms.

Each role fixes the diet capability pair, so these classes are built from
just a species and a vitality:

    wolf = Carnivore("wolf", 12)
    grass = Plant("grass", 3)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Type

from .base import Organism
from ..core.types import Species, DietRole


@dataclass(frozen=True, eq=False)
class Carnivore(Organism):
    """Eats meat only."""
    eats_meat: bool = field(default=True, init=False)
    eats_plants: bool = field(default=False, init=False)


@dataclass(frozen=True, eq=False)
class Omnivore(Organism):
    """Eats meat and plants."""
    eats_meat: bool = field(default=True, init=False)
    eats_plants: bool = field(default=True, init=False)


@dataclass(frozen=True, eq=False)
class Herbivore(Organism):
    """Eats plants only."""
    eats_meat: bool = field(default=False, init=False)
    eats_plants: bool = field(default=True, init=False)


@dataclass(frozen=True, eq=False)
class Plant(Organism):
    """Eats nothing; food for anything that eats plants."""
    eats_meat: bool = field(default=False, init=False)
    eats_plants: bool = field(default=False, init=False)


ROLE_CLASSES: Dict[DietRole, Type[Organism]] = {
    DietRole.CARNIVORE: Carnivore,
    DietRole.OMNIVORE: Omnivore,
    DietRole.HERBIVORE: Herbivore,
    DietRole.PLANT: Plant,
}


def create_organism(species: Species, vitality: int, role: DietRole | str) -> Organism:
    """
    Instantiate the organism class registered for a role.

    Args:
        species: Species identifier
        vitality: Starting vitality (non-negative)
        role: DietRole or its value/name (e.g. "herbivore", "HERBIVORE")
    """
    if isinstance(role, str):
        try:
            role = DietRole(role.lower())
        except ValueError:
            raise ValueError(
                f"Unknown diet role '{role}'. Expected one of: "
                + ", ".join(r.value for r in DietRole)
            ) from None
    return ROLE_CLASSES[role](species, vitality)
