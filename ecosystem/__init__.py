"""
Organism encounter model.

Usage:
    from ecosystem import Carnivore, Herbivore, Plant, encounter, reduce_series

    wolf, deer, _ = encounter(Carnivore("wolf", 12), Herbivore("deer", 8))
    survivor = reduce_series([Herbivore("deer", 5), Plant("grass", 3), Carnivore("wolf", 4)])
"""

from .core import DietRole, EncounterOutcome, EncounterValidation, PreconditionError
from .organisms import (
    Organism,
    Carnivore,
    Omnivore,
    Herbivore,
    Plant,
    OrganismSpec,
    create_organism,
)
from .mechanics import (
    EncounterResolver,
    EncounterResult,
    encounter,
    SeriesReducer,
    SeriesResult,
    reduce_series,
)

__all__ = [
    "DietRole",
    "EncounterOutcome",
    "EncounterValidation",
    "PreconditionError",
    "Organism",
    "Carnivore",
    "Omnivore",
    "Herbivore",
    "Plant",
    "OrganismSpec",
    "create_organism",
    "EncounterResolver",
    "EncounterResult",
    "encounter",
    "SeriesReducer",
    "SeriesResult",
    "reduce_series",
]
