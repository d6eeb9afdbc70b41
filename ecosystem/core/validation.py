"""
Precondition checks shared by the encounter resolver and the series reducer.

Callers can ask "is this input allowed?" through the validate_* helpers
without catching anything; the resolvers turn a failed validation into a
PreconditionError.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..organisms.base import Organism


@dataclass
class EncounterValidation:
    """
    Structured result of checking an encounter or series precondition.

    Attributes:
        valid: Whether the input is allowed
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "PLANT_PAIR": Both participants are pure plants; they never meet
        - "EMPTY_SERIES": A series reduction needs at least one organism
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> EncounterValidation:
        """Create a validation success result."""
        return EncounterValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> EncounterValidation:
        """Create a validation failure result."""
        return EncounterValidation(valid=False, error_code=error_code, message=message)

    def raise_if_invalid(self) -> None:
        """Raise PreconditionError when this validation failed."""
        if not self.valid:
            raise PreconditionError(self.error_code or "INVALID", self.message)


class PreconditionError(ValueError):
    """Raised when a caller hands the resolvers input they must never receive."""

    def __init__(self, error_code: str, message: str):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


def validate_encounter(first: Organism, second: Organism) -> EncounterValidation:
    """
    Check that two organisms may meet at all.

    At least one of the four diet capabilities across both organisms must be
    set. Two pure plants have nothing to do with each other, and asking for
    their encounter is a caller bug rather than a peaceful outcome.
    """
    if first.is_plant and second.is_plant:
        return EncounterValidation.fail(
            "PLANT_PAIR",
            f"{first.label()} and {second.label()} are both plants and cannot encounter",
        )
    return EncounterValidation.success()


def validate_series(organisms: Sequence[Organism]) -> EncounterValidation:
    """Check that a series has at least one organism to reduce."""
    if len(organisms) == 0:
        return EncounterValidation.fail(
            "EMPTY_SERIES",
            "Series reduction requires at least one organism",
        )
    return EncounterValidation.success()
