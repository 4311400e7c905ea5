"""Shared data models used across the petshelter package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
from uuid import uuid4


FamilyKind = Literal["foster", "permanent"]

ADOPTABLE_TYPES: frozenset[str] = frozenset({"cat", "dog", "mouse", "chicken", "rabbit"})


def _new_pet_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Pet:
    """An animal that can pass through a shelter and into a family.

    Pets are compared by ``id`` only: two pets with the same name and type
    are still different animals.
    """

    name: str | None = field(default=None, compare=False)
    pet_type: str | None = field(default=None, compare=False)
    id: str = field(default_factory=_new_pet_id, repr=False)

    def is_adoptable(self, allowed_types: frozenset[str] = ADOPTABLE_TYPES) -> bool:
        """True if the pet has a name and its type is one we rehome."""
        if not self.name:
            return False
        if not self.pet_type:
            return False
        return self.pet_type.lower() in allowed_types

    def describe(self) -> str:
        """Render as ``name (type)`` with the type lower-cased."""
        pet_type = (self.pet_type or "").lower()
        return f"{self.name} ({pet_type})"

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "pet_type": self.pet_type}


def contains_pet(pets: list[Pet], pet: Pet) -> bool:
    return any(p.id == pet.id for p in pets)


def index_of_pet(pets: list[Pet], pet: Pet) -> int | None:
    for i, p in enumerate(pets):
        if p.id == pet.id:
            return i
    return None
