"""Tests for Pet: construction, identity and adoptability."""

import dataclasses

import pytest

from petshelter.models import ADOPTABLE_TYPES, Pet, contains_pet, index_of_pet


def test_pet_sets_name_and_type():
    rufus = Pet("Rufus", "Dog")
    snowstorm = Pet("Snowstorm", "Cat")

    assert rufus.name == "Rufus"
    assert rufus.pet_type == "Dog"
    assert snowstorm.name == "Snowstorm"
    assert snowstorm.pet_type == "Cat"


def test_pet_is_immutable():
    pet = Pet("Rufus", "Dog")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pet.name = "Max"  # type: ignore[misc]


# --------------------------------------------------------------------------- #
# Identity
# --------------------------------------------------------------------------- #


def test_same_name_and_type_are_distinct_pets():
    a = Pet("Fluffy", "Dog")
    b = Pet("Fluffy", "Dog")
    assert a != b
    assert a.id != b.id
    assert a == a


def test_membership_helpers_compare_by_id():
    a = Pet("Fluffy", "Dog")
    b = Pet("Fluffy", "Dog")
    pets = [a]
    assert contains_pet(pets, a)
    assert not contains_pet(pets, b)
    assert index_of_pet(pets, a) == 0
    assert index_of_pet(pets, b) is None


# --------------------------------------------------------------------------- #
# Adoptability
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize("pet_type", ["cat", "Dog", "MOUSE", "Chicken", "rabbit"])
def test_named_pet_of_allowed_type_is_adoptable(pet_type):
    assert Pet("Ginger", pet_type).is_adoptable()


def test_pet_without_name_or_type_is_not_adoptable():
    assert not Pet().is_adoptable()
    assert not Pet("Joey").is_adoptable()
    assert not Pet(None, "Dog").is_adoptable()
    assert not Pet("", "Dog").is_adoptable()


def test_pet_of_other_type_is_not_adoptable():
    assert not Pet("Ruby", "Snake").is_adoptable()


def test_adoptability_respects_narrowed_types():
    only_cats = frozenset({"cat"})
    assert Pet("Tom", "Cat").is_adoptable(only_cats)
    assert not Pet("Rex", "Dog").is_adoptable(only_cats)


def test_allowed_types_are_fixed():
    assert ADOPTABLE_TYPES == {"cat", "dog", "mouse", "chicken", "rabbit"}


def test_describe_lowercases_type():
    assert Pet("Ginger", "Chicken").describe() == "Ginger (chicken)"
