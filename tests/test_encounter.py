import logging

import pytest

from ecosystem import (
    Carnivore,
    EncounterOutcome,
    EncounterResolver,
    EncounterResult,
    Herbivore,
    Omnivore,
    Organism,
    Plant,
    PreconditionError,
    encounter,
)


def test_encounter_is_deterministic():
    wolf = Carnivore("wolf", 12)
    deer = Herbivore("deer", 8)

    assert encounter(wolf, deer) == encounter(wolf, deer)


def test_result_unpacks_as_triple():
    first, second, offspring = encounter(Herbivore("deer", 5), Plant("grass", 3))

    assert first == Herbivore("deer", 8)
    assert second == Plant("grass", 0)
    assert offspring is None


@pytest.mark.parametrize(
    "first, second",
    [
        (Carnivore("wolf", 0), Herbivore("deer", 5)),
        (Carnivore("wolf", 9), Herbivore("deer", 0)),
        (Herbivore("deer", 0), Herbivore("deer", 4)),
        (Herbivore("deer", 0), Plant("grass", 3)),
    ],
)
def test_dead_participant_short_circuits(first, second):
    result = encounter(first, second)

    assert tuple(result) == (first, second, None)
    assert result.outcome == EncounterOutcome.DEAD_PARTICIPANT


def test_mating_produces_offspring_and_keeps_parents():
    mother = Herbivore("deer", 10)
    father = Herbivore("deer", 20)

    result = encounter(mother, father)

    assert result.outcome == EncounterOutcome.MATING
    assert result.first == mother
    assert result.second == father
    assert result.offspring == Herbivore("deer", 15)


def test_mating_floors_the_average():
    _, _, child = encounter(Carnivore("wolf", 10), Carnivore("wolf", 11))
    assert child == Carnivore("wolf", 10)


def test_mating_precedes_predation():
    # Same species and role omnivores could eat each other, but they mate.
    result = encounter(Omnivore("bear", 3), Omnivore("bear", 9))
    assert result.outcome == EncounterOutcome.MATING
    assert result.offspring.vitality == 6


@pytest.mark.parametrize(
    "first, second",
    [
        (Carnivore("wolf", 5), Plant("grass", 5)),
        (Herbivore("deer", 5), Herbivore("goat", 2)),
        (Plant("grass", 4), Carnivore("wolf", 1)),
    ],
)
def test_coexistence_leaves_both_unchanged(first, second):
    result = encounter(first, second)

    assert tuple(result) == (first, second, None)
    assert result.outcome == EncounterOutcome.COEXISTENCE


def test_mutual_predation_tie_kills_both():
    result = encounter(Carnivore("wolf", 5), Carnivore("lynx", 5))

    assert tuple(result) == (Carnivore("wolf", 0), Carnivore("lynx", 0), None)
    assert result.outcome == EncounterOutcome.MUTUAL_KILL


def test_mutual_predation_same_species_different_role():
    result = encounter(Carnivore("fox", 5), Omnivore("fox", 5))
    assert result.outcome == EncounterOutcome.MUTUAL_KILL


def test_mutual_predation_first_wins():
    result = encounter(Carnivore("wolf", 10), Omnivore("bear", 7))

    assert result.first == Carnivore("wolf", 13)
    assert result.second == Omnivore("bear", 0)
    assert result.offspring is None
    assert result.outcome == EncounterOutcome.MUTUAL_PREDATION


def test_mutual_predation_second_wins():
    result = encounter(Carnivore("wolf", 7), Omnivore("bear", 12))

    assert result.first == Carnivore("wolf", 0)
    assert result.second == Omnivore("bear", 15)


def test_grazing_absorbs_whole_plant():
    result = encounter(Herbivore("deer", 5), Plant("grass", 3))

    assert result.first.vitality == 8
    assert result.second.vitality == 0
    assert result.outcome == EncounterOutcome.GRAZING


def test_grazing_ignores_relative_vitality_and_order():
    assert tuple(encounter(Herbivore("deer", 2), Plant("oak", 10))) == (
        Herbivore("deer", 12),
        Plant("oak", 0),
        None,
    )
    assert tuple(encounter(Plant("grass", 3), Omnivore("bear", 4))) == (
        Plant("grass", 0),
        Omnivore("bear", 7),
        None,
    )


def test_predation_by_stronger_predator():
    result = encounter(Carnivore("wolf", 12), Herbivore("deer", 8))

    assert tuple(result) == (Carnivore("wolf", 16), Herbivore("deer", 0), None)
    assert result.outcome == EncounterOutcome.PREDATION


def test_predation_when_predator_is_second():
    result = encounter(Herbivore("deer", 7), Omnivore("bear", 20))

    assert tuple(result) == (Herbivore("deer", 0), Omnivore("bear", 23), None)


@pytest.mark.parametrize(
    "first, second",
    [
        (Carnivore("wolf", 4), Herbivore("deer", 10)),
        (Carnivore("wolf", 6), Herbivore("deer", 6)),
        (Herbivore("deer", 10), Carnivore("wolf", 4)),
    ],
)
def test_weak_predator_changes_nothing(first, second):
    result = encounter(first, second)

    assert tuple(result) == (first, second, None)
    assert result.outcome == EncounterOutcome.FAILED_PREDATION


def test_two_plants_violate_precondition():
    with pytest.raises(PreconditionError) as excinfo:
        encounter(Plant("grass", 3), Plant("grass", 0))

    assert excinfo.value.error_code == "PLANT_PAIR"
    assert isinstance(excinfo.value, ValueError)


def test_resolver_validate_does_not_raise():
    resolver = EncounterResolver()

    assert not resolver.validate(Plant("grass", 1), Plant("moss", 1)).valid
    assert resolver.validate(Herbivore("deer", 1), Plant("moss", 1)).valid


def test_inputs_are_not_modified():
    wolf = Carnivore("wolf", 12)
    deer = Herbivore("deer", 8)

    encounter(wolf, deer)

    assert wolf.vitality == 12
    assert deer.vitality == 8


def test_fatal_outcomes():
    assert EncounterOutcome.PREDATION.is_fatal
    assert EncounterOutcome.GRAZING.is_fatal
    assert not EncounterOutcome.FAILED_PREDATION.is_fatal
    assert not EncounterOutcome.MATING.is_fatal


def test_result_dict_roundtrip():
    result = encounter(Herbivore("deer", 10), Herbivore("deer", 20))
    data = result.to_dict()

    assert data["outcome"] == "MATING"
    assert data["offspring"] == {"species": "deer", "role": "herbivore", "vitality": 15}
    assert EncounterResult.from_dict(data) == result


def test_resolver_logs_decisions(caplog):
    caplog.set_level(logging.DEBUG, logger="ecosystem.mechanics.encounter")

    encounter(Herbivore("deer", 5), Plant("grass", 3))

    assert "grazes on" in caplog.text


def test_result_dict_roundtrip_with_plain_organism():
    result = encounter(Organism("bear", 10, eats_meat=True, eats_plants=True), Omnivore("wolf", 4))

    assert result.first == Omnivore("bear", 12)
    assert EncounterResult.from_dict(result.to_dict()) == result
