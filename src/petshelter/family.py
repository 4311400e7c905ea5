"""Families: capacity-bounded custodians of pets.

A single ``Family`` type covers both foster and permanent households. The
``kind`` field selects the intake behaviour: permanent families accrue a
fixed fee for every pet they take in, foster families do not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from petshelter.errors import CapacityExceeded, DuplicatePet, NotFound
from petshelter.models import FamilyKind, Pet, contains_pet, index_of_pet

logger = logging.getLogger(__name__)

ADOPTION_FEE: int = 25


@dataclass
class Family:
    last_name: str
    capacity: int
    kind: FamilyKind = "foster"
    # Per-intake charge; defaults to ADOPTION_FEE for permanent families.
    fee: int | None = None
    current_pets: list[Pet] = field(default_factory=list)
    past_pets: list[Pet] = field(default_factory=list)
    # Only tracked for permanent families; None for foster.
    adoption_expenses: int | None = None
    expenses_paid: int | None = None

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")
        if self.kind not in ("foster", "permanent"):
            raise ValueError(f"Unknown family kind: {self.kind!r}")
        if self.kind == "permanent":
            if self.adoption_expenses is None:
                self.adoption_expenses = 0
            if self.expenses_paid is None:
                self.expenses_paid = 0
            if self.fee is None:
                self.fee = ADOPTION_FEE
        else:
            self.fee = 0

    @classmethod
    def foster(cls, last_name: str, capacity: int) -> "Family":
        return cls(last_name=last_name, capacity=capacity, kind="foster")

    @classmethod
    def permanent(
        cls, last_name: str, capacity: int, fee: int = ADOPTION_FEE
    ) -> "Family":
        return cls(last_name=last_name, capacity=capacity, kind="permanent", fee=fee)

    # ------------------------------------------------------------------ #
    # Capacity
    # ------------------------------------------------------------------ #

    @property
    def is_permanent(self) -> bool:
        return self.kind == "permanent"

    @property
    def available_capacity(self) -> int:
        return self.capacity - len(self.current_pets)

    @property
    def is_full(self) -> bool:
        return self.available_capacity <= 0

    @property
    def outstanding_balance(self) -> int | None:
        """Fees owed but not yet paid, or None for a foster family."""
        if not self.is_permanent:
            return None
        return self.adoption_expenses - self.expenses_paid  # type: ignore[operator]

    # ------------------------------------------------------------------ #
    # Intake / release
    # ------------------------------------------------------------------ #

    def add_pet(self, pet: Pet) -> None:
        """Take a pet into the household.

        Raises CapacityExceeded when the family is full and DuplicatePet when
        the pet is already here. Nothing changes, and no fee is charged, when
        either check fails.
        """
        if self.is_full:
            raise CapacityExceeded(
                f"The {self.last_name} family is at capacity ({self.capacity})"
            )
        if contains_pet(self.current_pets, pet):
            raise DuplicatePet(
                f"{pet.name} is already with the {self.last_name} family"
            )

        self.current_pets.append(pet)
        if self.is_permanent:
            self.adoption_expenses += self.fee  # type: ignore[operator]
        logger.debug(
            "%s family took in %s (%d/%d)",
            self.last_name, pet.name, len(self.current_pets), self.capacity,
        )

    def remove_pet(self, pet: Pet) -> None:
        """Move a pet from current custody into the family's history."""
        idx = index_of_pet(self.current_pets, pet)
        if idx is None:
            raise NotFound(f"{pet.name} is not with the {self.last_name} family")
        self.past_pets.append(self.current_pets.pop(idx))
        logger.debug("%s family released %s", self.last_name, pet.name)

    def to_dict(self) -> dict:
        d = {
            "last_name": self.last_name,
            "kind": self.kind,
            "capacity": self.capacity,
            "current_pets": [p.to_dict() for p in self.current_pets],
            "past_pets": [p.to_dict() for p in self.past_pets],
        }
        if self.is_permanent:
            d["adoption_expenses"] = self.adoption_expenses
            d["expenses_paid"] = self.expenses_paid
        return d
