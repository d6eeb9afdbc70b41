"""
Core type definitions for the organism encounter model.

This module contains the fundamental enums and aliases used throughout
the system. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Any

# ============================================================================
# SPECIES
# ============================================================================

# Species identifiers are opaque: only equality comparison is required.
# Strings, ints or any user-defined value with __eq__ will do.
Species = Any


# ============================================================================
# DIET ROLES
# ============================================================================

class DietRole(Enum):
    """Diet role derived from the (eats_meat, eats_plants) capability pair."""
    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"
    HERBIVORE = "herbivore"
    PLANT = "plant"

    def __str__(self) -> str:
        return self.value

    @property
    def capabilities(self) -> tuple[bool, bool]:
        """Get the (eats_meat, eats_plants) pair for this role."""
        return {
            DietRole.CARNIVORE: (True, False),
            DietRole.OMNIVORE: (True, True),
            DietRole.HERBIVORE: (False, True),
            DietRole.PLANT: (False, False),
        }[self]

    @property
    def eats_meat(self) -> bool:
        return self.capabilities[0]

    @property
    def eats_plants(self) -> bool:
        return self.capabilities[1]

    @classmethod
    def from_capabilities(cls, eats_meat: bool, eats_plants: bool) -> DietRole:
        """Map a capability pair back to its role."""
        for role in cls:
            if role.capabilities == (bool(eats_meat), bool(eats_plants)):
                return role
        raise ValueError(f"No diet role for eats_meat={eats_meat}, eats_plants={eats_plants}")


# ============================================================================
# ENCOUNTER OUTCOMES
# ============================================================================

class EncounterOutcome(Enum):
    """Which rule of the encounter decision table produced a result."""
    DEAD_PARTICIPANT = "dead_participant"  # One side was already dead
    MATING = "mating"  # Same species and role, offspring produced
    COEXISTENCE = "coexistence"  # Neither side can eat the other
    MUTUAL_PREDATION = "mutual_predation"  # Both can eat each other, stronger wins
    MUTUAL_KILL = "mutual_kill"  # Both can eat each other, equal vitality
    GRAZING = "grazing"  # A plant eater consumed a pure plant
    PREDATION = "predation"  # One-sided hunt succeeded
    FAILED_PREDATION = "failed_predation"  # One-sided hunt by a weaker or equal predator
    NO_EFFECT = "no_effect"  # Fallback, nothing matched

    def __str__(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def is_fatal(self) -> bool:
        """Whether this outcome leaves at least one participant dead."""
        return self in (
            EncounterOutcome.MUTUAL_PREDATION,
            EncounterOutcome.MUTUAL_KILL,
            EncounterOutcome.GRAZING,
            EncounterOutcome.PREDATION,
        )
