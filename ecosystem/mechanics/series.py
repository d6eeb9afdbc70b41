"""
Series reduction - fold encounters over an ordered list of organisms.

The first organism meets every other organism in order. After each
encounter only its own post-encounter state is carried forward: the other
participant's new state and any offspring are dropped. The answer is "what
does the first organism become after meeting everyone", not "what is the
final population".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from infra.logger import get_logger

from ..core.validation import validate_series
from ..organisms.base import Organism
from .encounter import EncounterResolver, EncounterResult

log = get_logger(__name__)


@dataclass
class SeriesResult:
    """
    Complete result of reducing a series.

    Attributes:
        survivor: The first organism after meeting everyone in order
        encounters: Every intermediate encounter in execution order
    """
    survivor: Organism
    encounters: List[EncounterResult] = field(default_factory=list)

    @property
    def logs(self) -> List[str]:
        return [result.log for result in self.encounters]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the series result to a dict."""
        return {
            "survivor": self.survivor.to_dict(),
            "encounters": [r.to_dict() for r in self.encounters],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeriesResult":
        """Deserialize a series result from a dict."""
        return cls(
            survivor=Organism.from_dict(data["survivor"]),
            encounters=[EncounterResult.from_dict(r) for r in data.get("encounters", [])],
        )


class SeriesReducer:
    """
    Sequential reducer over an ordered list of organisms.

    Each step depends on the previous survivor, so the fold is strictly
    left to right and iterative.
    """

    def __init__(self, resolver: Optional[EncounterResolver] = None):
        self._resolver = resolver or EncounterResolver()

    def trace(self, organisms: Iterable[Organism]) -> SeriesResult:
        """
        Reduce a series and keep every intermediate encounter.

        Raises:
            PreconditionError: the series is empty ("EMPTY_SERIES") or an
                encounter pairs two plants ("PLANT_PAIR").
        """
        items = list(organisms)
        validate_series(items).raise_if_invalid()

        survivor = items[0]
        encounters: List[EncounterResult] = []
        log.debug("Reducing series of %d organisms starting with %s", len(items), survivor.label())

        for other in items[1:]:
            result = self._resolver.resolve(survivor, other)
            encounters.append(result)
            survivor = result.first

        log.debug("Series survivor: %s", survivor.label())
        return SeriesResult(survivor=survivor, encounters=encounters)

    def reduce(self, organisms: Iterable[Organism]) -> Organism:
        """Reduce a series to the evolved first organism."""
        return self.trace(organisms).survivor


def reduce_series(organisms: Iterable[Organism]) -> Organism:
    """
    Reduce `organisms` left to right and return the evolved first organism.

    A single organism reduces to itself. An empty series raises
    PreconditionError instead of returning a default organism.
    """
    return SeriesReducer().reduce(organisms)
