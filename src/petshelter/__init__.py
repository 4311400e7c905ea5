"""Pet adoption rules: shelters, families and the adoption transaction."""

from petshelter.errors import (
    CapacityExceeded,
    DuplicatePet,
    IneligiblePet,
    NotFound,
    RosterError,
    ShelterError,
)
from petshelter.family import ADOPTION_FEE, Family
from petshelter.models import ADOPTABLE_TYPES, Pet
from petshelter.shelter import Shelter, bulk_add_pets, do_adoption, search_for

__all__ = [
    "ADOPTABLE_TYPES",
    "ADOPTION_FEE",
    "CapacityExceeded",
    "DuplicatePet",
    "Family",
    "IneligiblePet",
    "NotFound",
    "Pet",
    "RosterError",
    "Shelter",
    "ShelterError",
    "bulk_add_pets",
    "do_adoption",
    "search_for",
]
