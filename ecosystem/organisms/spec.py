from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..core.types import DietRole
from .base import Organism
from .roles import create_organism


class OrganismSpec(BaseModel):
    """
    Serializable description of an organism.

    Intended for configuration data (fixtures, demo series, UI payloads) so
    that organisms can be described as plain dicts and validated before use.
    """
    species: Any
    role: DietRole
    vitality: int = Field(strict=True, ge=0, description="Starting life energy; 0 means dead")

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> Any:
        # Accept enum names ("HERBIVORE") as well as values ("herbivore").
        if isinstance(value, str):
            return value.lower()
        return value

    def to_organism(self) -> Organism:
        """Instantiate the role-specific organism."""
        return create_organism(self.species, self.vitality, self.role)

    @classmethod
    def from_organism(cls, organism: Organism) -> "OrganismSpec":
        """Describe an existing organism."""
        return cls(species=organism.species, role=organism.role, vitality=organism.vitality)
