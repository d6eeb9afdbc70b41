from dataclasses import FrozenInstanceError

import pytest

from ecosystem import Carnivore, DietRole, Herbivore, Omnivore, Organism, Plant


def test_roles_fix_capabilities():
    assert Carnivore("wolf", 1).role == DietRole.CARNIVORE
    assert Omnivore("bear", 1).role == DietRole.OMNIVORE
    assert Herbivore("deer", 1).role == DietRole.HERBIVORE
    assert Plant("grass", 1).role == DietRole.PLANT

    wolf = Carnivore("wolf", 1)
    assert wolf.eats_meat and not wolf.eats_plants


def test_plain_organism_defaults_to_plant():
    moss = Organism("moss", 2)
    assert moss.is_plant
    assert moss.role == DietRole.PLANT
    assert Organism("bear", 2, eats_meat=True, eats_plants=True).role == DietRole.OMNIVORE


def test_accessors_and_death():
    deer = Herbivore("deer", 7)
    assert deer.get_species() == "deer"
    assert deer.get_vitality() == 7
    assert not deer.is_dead()
    assert Herbivore("deer", 0).is_dead()


@pytest.mark.parametrize("vitality", [-1, 2.5, "3", True, None])
def test_invalid_vitality_rejected(vitality):
    with pytest.raises(ValueError):
        Carnivore("wolf", vitality)


def test_role_subclasses_do_not_accept_capabilities():
    with pytest.raises(TypeError):
        Carnivore("wolf", 3, eats_plants=True)


def test_organisms_are_immutable():
    wolf = Carnivore("wolf", 3)
    with pytest.raises(FrozenInstanceError):
        wolf.vitality = 10


def test_with_vitality_returns_new_value_of_same_role():
    wolf = Carnivore("wolf", 3)
    fed = wolf.with_vitality(9)

    assert isinstance(fed, Carnivore)
    assert fed == Carnivore("wolf", 9)
    assert wolf.vitality == 3


def test_will_mate_requires_same_species_and_role():
    assert Herbivore("deer", 1).will_mate(Herbivore("deer", 5))
    assert not Herbivore("deer", 1).will_mate(Herbivore("goat", 5))
    assert not Carnivore("fox", 1).will_mate(Omnivore("fox", 5))
    # Capability bits decide, not the Python class.
    assert Organism("bear", 4, eats_meat=True, eats_plants=True).will_mate(Omnivore("bear", 6))


def test_will_eat_is_asymmetric():
    wolf = Carnivore("wolf", 1)
    bear = Omnivore("bear", 1)
    deer = Herbivore("deer", 1)
    grass = Plant("grass", 1)

    # Meat eaters eat anything that eats something.
    assert wolf.will_eat(deer)
    assert wolf.will_eat(bear)
    assert not wolf.will_eat(grass)

    # Plant eaters eat only pure plants.
    assert deer.will_eat(grass)
    assert not deer.will_eat(wolf)
    assert bear.will_eat(grass)
    assert bear.will_eat(deer)

    assert not grass.will_eat(deer)


def test_offspring_takes_first_parent_role_and_floored_mean():
    parent = Organism("bear", 10, eats_meat=True, eats_plants=True)
    child = parent.offspring_with(Omnivore("bear", 11))

    assert child.vitality == 10
    assert child.species == "bear"
    assert child.role == DietRole.OMNIVORE


def test_dict_roundtrip_restores_role_class():
    bear = Omnivore("bear", 12)
    data = bear.to_dict()

    assert data == {"species": "bear", "role": "omnivore", "vitality": 12}
    assert Organism.from_dict(data) == bear


def test_equality_follows_capabilities_not_class():
    plain = Organism("bear", 6, eats_meat=True, eats_plants=True)

    assert plain == Omnivore("bear", 6)
    assert hash(plain) == hash(Omnivore("bear", 6))
    assert plain != Carnivore("bear", 6)
    assert plain != Omnivore("bear", 7)


def test_plain_organism_dict_roundtrip():
    plain = Organism("fox", 4, eats_meat=True)
    restored = Organism.from_dict(plain.to_dict())

    assert isinstance(restored, Carnivore)
    assert restored == plain
