"""
EncounterResolver - Pairwise encounter resolution.

This module decides what happens when two organisms meet:
- Checking the encounter precondition
- Short-circuiting dead participants
- Mating, peaceful coexistence, predation and grazing
- Generating encounter logs

Rules are evaluated in a fixed order and the first match wins; later rules
assume earlier ones did not match.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from infra.logger import get_logger

from ..core.types import EncounterOutcome
from ..core.validation import EncounterValidation, validate_encounter
from ..organisms.base import Organism

log = get_logger(__name__)


@dataclass(frozen=True)
class EncounterResult:
    """
    Result of resolving one encounter.

    Unpacks as the triple `(first, second, offspring)`:

        a, b, child = encounter(a, b)

    Attributes:
        first: First participant after the encounter
        second: Second participant after the encounter
        offspring: Newborn organism when the pair mated, else None
        outcome: Decision-table rule that produced this result
        log: Human-readable description of what happened
    """
    first: Organism
    second: Organism
    offspring: Optional[Organism]
    outcome: EncounterOutcome
    log: str = ""

    def __iter__(self) -> Iterator[Optional[Organism]]:
        return iter((self.first, self.second, self.offspring))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize encounter result to a plain dict."""
        return {
            "first": self.first.to_dict(),
            "second": self.second.to_dict(),
            "offspring": self.offspring.to_dict() if self.offspring else None,
            "outcome": self.outcome.name,
            "log": self.log,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EncounterResult":
        """Deserialize an encounter result from a dict."""
        offspring = data.get("offspring")
        return cls(
            first=Organism.from_dict(data["first"]),
            second=Organism.from_dict(data["second"]),
            offspring=Organism.from_dict(offspring) if offspring else None,
            outcome=EncounterOutcome[data["outcome"]],
            log=data.get("log", ""),
        )


class EncounterResolver:
    """
    Stateless resolver for pairwise encounters.

    The EncounterResolver:
    - Validates that the pair may meet (two pure plants may not)
    - Applies the decision table in order
    - Returns new organism values; inputs are never modified

    Usage:
        resolver = EncounterResolver()
        result = resolver.resolve(Carnivore("wolf", 12), Herbivore("deer", 8))
        print(result.log)
    """

    def validate(self, first: Organism, second: Organism) -> EncounterValidation:
        """Check the encounter precondition without raising."""
        return validate_encounter(first, second)

    def resolve(self, first: Organism, second: Organism) -> EncounterResult:
        """
        Resolve an encounter between two organisms.

        Args:
            first: First participant (offspring inherit its species and role)
            second: Second participant

        Returns:
            EncounterResult with both post-encounter organisms

        Raises:
            PreconditionError: both organisms are pure plants. This is a
                caller bug; such a pair never meets.
        """
        self.validate(first, second).raise_if_invalid()

        result = self._apply_rules(first, second)
        log.debug("%s", result.log)
        return result

    def _apply_rules(self, a: Organism, b: Organism) -> EncounterResult:
        if a.is_dead() or b.is_dead():
            return self._unchanged(
                a, b, EncounterOutcome.DEAD_PARTICIPANT,
                f"{a.label()} meets {b.label()}: already dead, nothing happens",
            )

        if a.will_mate(b):
            child = a.offspring_with(b)
            return EncounterResult(
                first=a,
                second=b,
                offspring=child,
                outcome=EncounterOutcome.MATING,
                log=f"{a.label()} mates with {b.label()} -> offspring {child.label()}",
            )

        a_eats_b = a.will_eat(b)
        b_eats_a = b.will_eat(a)

        if not a_eats_b and not b_eats_a:
            return self._unchanged(
                a, b, EncounterOutcome.COEXISTENCE,
                f"{a.label()} and {b.label()} coexist",
            )

        if a_eats_b and b_eats_a:
            return self._mutual_predation(a, b)

        if a_eats_b:
            return self._one_sided(predator=a, prey=b, predator_first=True)

        if b_eats_a:
            return self._one_sided(predator=b, prey=a, predator_first=False)

        return self._unchanged(  # pragma: no cover
            a, b, EncounterOutcome.NO_EFFECT,
            f"{a.label()} meets {b.label()}: no effect",
        )

    def _mutual_predation(self, a: Organism, b: Organism) -> EncounterResult:
        if a.vitality == b.vitality:
            return EncounterResult(
                first=a.with_vitality(0),
                second=b.with_vitality(0),
                offspring=None,
                outcome=EncounterOutcome.MUTUAL_KILL,
                log=f"{a.label()} and {b.label()} kill each other",
            )

        if a.vitality > b.vitality:
            winner, loser = a.with_vitality(a.vitality + b.vitality // 2), b.with_vitality(0)
            first, second = winner, loser
            text = f"{a.label()} overpowers {b.label()}"
        else:
            winner, loser = b.with_vitality(b.vitality + a.vitality // 2), a.with_vitality(0)
            first, second = loser, winner
            text = f"{b.label()} overpowers {a.label()}"

        return EncounterResult(
            first=first,
            second=second,
            offspring=None,
            outcome=EncounterOutcome.MUTUAL_PREDATION,
            log=f"{text} (winner now {winner.vitality})",
        )

    def _one_sided(self, predator: Organism, prey: Organism, predator_first: bool) -> EncounterResult:
        """Exactly one side can eat the other."""
        if prey.is_plant:
            # Grazing: the whole plant is absorbed.
            fed = predator.with_vitality(predator.vitality + prey.vitality)
            eaten = prey.with_vitality(0)
            outcome = EncounterOutcome.GRAZING
            text = f"{predator.label()} grazes on {prey.label()} (now {fed.vitality})"
        elif predator.vitality > prey.vitality:
            fed = predator.with_vitality(predator.vitality + prey.vitality // 2)
            eaten = prey.with_vitality(0)
            outcome = EncounterOutcome.PREDATION
            text = f"{predator.label()} hunts down {prey.label()} (now {fed.vitality})"
        else:
            # A failed hunt costs nothing; unlike mutual predation, a tie kills no one.
            first, second = (predator, prey) if predator_first else (prey, predator)
            return self._unchanged(
                first, second, EncounterOutcome.FAILED_PREDATION,
                f"{predator.label()} is too weak to hunt {prey.label()}",
            )

        first, second = (fed, eaten) if predator_first else (eaten, fed)
        return EncounterResult(first=first, second=second, offspring=None, outcome=outcome, log=text)

    @staticmethod
    def _unchanged(a: Organism, b: Organism, outcome: EncounterOutcome, text: str) -> EncounterResult:
        return EncounterResult(first=a, second=b, offspring=None, outcome=outcome, log=text)


_default_resolver = EncounterResolver()


def encounter(first: Organism, second: Organism) -> EncounterResult:
    """Resolve one encounter with the shared stateless resolver."""
    return _default_resolver.resolve(first, second)
