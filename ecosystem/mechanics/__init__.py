"""
Mechanics module - Encounter resolution systems.

This module provides stateless resolvers:
- EncounterResolver: Resolves one pairwise encounter
- SeriesReducer: Folds encounters over an ordered list of organisms

All resolvers are stateless - they take organisms and return new values
without modifying their inputs or their own state.
"""

from .encounter import EncounterResolver, EncounterResult, encounter
from .series import SeriesReducer, SeriesResult, reduce_series

__all__ = [
    "EncounterResolver",
    "EncounterResult",
    "encounter",
    "SeriesReducer",
    "SeriesResult",
    "reduce_series",
]
