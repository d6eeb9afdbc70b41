"""
Core types and precondition checks for the organism encounter model.
"""

from .types import (
    Species,
    DietRole,
    EncounterOutcome,
)
from .validation import (
    EncounterValidation,
    PreconditionError,
    validate_encounter,
    validate_series,
)


__all__ = [
    "Species",
    "DietRole",
    "EncounterOutcome",
    "EncounterValidation",
    "PreconditionError",
    "validate_encounter",
    "validate_series",
]
