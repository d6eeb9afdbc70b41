"""
Organism definitions for the encounter model.

This module exports all organism types:
- Organism (value type with explicit capabilities)
- Carnivore, Omnivore, Herbivore, Plant (role-fixed organisms)
- OrganismSpec (dict/config description)
"""

from .base import Organism
from .roles import Carnivore, Omnivore, Herbivore, Plant, ROLE_CLASSES, create_organism
from .spec import OrganismSpec

__all__ = [
    "Organism",
    "Carnivore",
    "Omnivore",
    "Herbivore",
    "Plant",
    "ROLE_CLASSES",
    "create_organism",
    "OrganismSpec",
]
