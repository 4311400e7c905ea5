"""Shelter inventory and the adoption transaction."""

from __future__ import annotations

import logging
from typing import Iterator

from petshelter.errors import DuplicatePet, IneligiblePet, NotFound
from petshelter.family import Family
from petshelter.models import ADOPTABLE_TYPES, Pet, contains_pet, index_of_pet

logger = logging.getLogger(__name__)

TWEET_PREFIX = "Today we have {count} pets up for adoption: "


class Shelter:
    """Holds adoptable pets until a family takes them in."""

    def __init__(self, adoptable_types: frozenset[str] = ADOPTABLE_TYPES):
        self.adoptable_types = adoptable_types
        self.pets: list[Pet] = []

    def __len__(self) -> int:
        return len(self.pets)

    def __contains__(self, pet: object) -> bool:
        return isinstance(pet, Pet) and contains_pet(self.pets, pet)

    def __iter__(self) -> Iterator[Pet]:
        return iter(list(self.pets))

    def add_pet(self, pet: Pet) -> None:
        if not pet.is_adoptable(self.adoptable_types):
            raise IneligiblePet(
                f"{pet.name or 'Unnamed pet'} ({pet.pet_type or 'unknown type'}) "
                "cannot be taken in for adoption"
            )
        if pet in self:
            raise DuplicatePet(f"{pet.name} is already in the shelter")
        self.pets.append(pet)
        logger.debug("Shelter took in %s", pet.describe())

    def print_tweet(self) -> str:
        """One-line announcement of every pet waiting for a home."""
        listing = ", ".join(p.describe() for p in self.pets)
        return TWEET_PREFIX.format(count=len(self.pets)) + listing

    def _release(self, pet: Pet) -> Pet:
        idx = index_of_pet(self.pets, pet)
        if idx is None:
            raise NotFound(f"{pet.name} is not in the shelter")
        return self.pets.pop(idx)


# --------------------------------------------------------------------------- #
# Shelter-level operations
# --------------------------------------------------------------------------- #

def bulk_add_pets(shelter: Shelter, *pets: Pet) -> None:
    """Add pets in order, stopping at the first one that is rejected.

    Pets added before the failure stay in the shelter.
    """
    for pet in pets:
        shelter.add_pet(pet)


def search_for(shelter: Shelter, pet_type: str) -> list[Pet]:
    """Pets of the given type (case-insensitive), in shelter order."""
    wanted = pet_type.lower()
    return [p for p in shelter.pets if (p.pet_type or "").lower() == wanted]


def do_adoption(shelter: Shelter, family: Family, pet: Pet) -> Pet:
    """Move a pet from the shelter into a family.

    The family must accept the pet before it leaves the shelter, so a
    failed intake leaves both sides exactly as they were.
    """
    if pet not in shelter:
        raise NotFound(f"{pet.name} is not in the shelter")

    family.add_pet(pet)
    shelter._release(pet)

    logger.debug(
        "%s adopted by the %s family (%s)", pet.describe(), family.last_name, family.kind
    )
    return pet
