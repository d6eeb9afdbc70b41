"""
Organism value type.

An Organism is an immutable record of a species, a diet capability pair and
a vitality. Encounters never modify an organism in place: every change in
vitality produces a new Organism value that replaces the old binding.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict

from ..core.types import Species, DietRole


@dataclass(frozen=True, eq=False)
class Organism:
    """
    A living (or dead) organism.

    The plain class accepts any capability pair and defaults to a plant.
    The role subclasses in `roles.py` fix the pair and only take a species
    and a vitality.

    Attributes:
        species: Opaque identifier, compared by equality only
        vitality: Non-negative life energy; 0 means dead
        eats_meat: Whether this organism can eat meat
        eats_plants: Whether this organism can eat plants
    """
    species: Species
    vitality: int
    eats_meat: bool = False
    eats_plants: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.vitality, bool) or not isinstance(self.vitality, int):
            raise ValueError(f"Vitality must be an int, got {type(self.vitality).__name__}")
        if self.vitality < 0:
            raise ValueError(f"Vitality must be non-negative, got {self.vitality}")

    # Equality follows species, capability bits and vitality; the Python
    # class (plain Organism or a role subclass) does not take part.
    def _value_key(self) -> tuple:
        return (self.species, self.eats_meat, self.eats_plants, self.vitality)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Organism):
            return NotImplemented
        return self._value_key() == other._value_key()

    def __hash__(self) -> int:
        return hash(self._value_key())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_species(self) -> Species:
        return self.species

    def get_vitality(self) -> int:
        return self.vitality

    def is_dead(self) -> bool:
        return self.vitality == 0

    @property
    def role(self) -> DietRole:
        """Diet role derived from the capability pair."""
        return DietRole.from_capabilities(self.eats_meat, self.eats_plants)

    @property
    def is_plant(self) -> bool:
        """True for the terminal role that eats neither meat nor plants."""
        return not self.eats_meat and not self.eats_plants

    # ------------------------------------------------------------------
    # Interaction predicates
    # ------------------------------------------------------------------

    def will_mate(self, other: Organism) -> bool:
        """Same species and exactly the same diet capabilities."""
        return (
            self.species == other.species
            and self.eats_meat == other.eats_meat
            and self.eats_plants == other.eats_plants
        )

    def will_eat(self, other: Organism) -> bool:
        """
        Whether this organism can eat `other`.

        Meat eaters eat anything that eats something; plant eaters eat pure
        plants. Not symmetric: check each direction separately.
        """
        if self.eats_meat and (other.eats_meat or other.eats_plants):
            return True
        return self.eats_plants and other.is_plant

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def with_vitality(self, vitality: int) -> Organism:
        """Return a copy with a new vitality; species and role are kept."""
        return replace(self, vitality=vitality)

    def offspring_with(self, other: Organism) -> Organism:
        """Offspring takes this organism's species and role and the floored mean vitality."""
        return self.with_vitality((self.vitality + other.vitality) // 2)

    def label(self) -> str:
        """Short human-readable label for logs."""
        return f"{self.role.value.title()}({self.species!r}, vitality={self.vitality})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the organism to a plain dict."""
        return {
            "species": self.species,
            "role": self.role.value,
            "vitality": self.vitality,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Organism:
        """Build the role-specific organism described by a dict."""
        from .spec import OrganismSpec

        return OrganismSpec.model_validate(data).to_organism()
