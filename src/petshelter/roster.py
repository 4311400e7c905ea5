"""Roster files: pets, families and planned adoptions described in TOML."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from petshelter.errors import RosterError
from petshelter.family import ADOPTION_FEE, Family
from petshelter.models import Pet


@dataclass
class AdoptionRequest:
    family: str
    pet: str


@dataclass
class Roster:
    """Parsed contents of a roster file."""

    pets: list[Pet] = field(default_factory=list)
    families: list[Family] = field(default_factory=list)
    adoptions: list[AdoptionRequest] = field(default_factory=list)

    def family_named(self, last_name: str) -> Family:
        for fam in self.families:
            if fam.last_name == last_name:
                return fam
        raise RosterError(f"No family named {last_name!r} in roster")


def load_roster(path: Path, fee: int = ADOPTION_FEE) -> Roster:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise RosterError(f"Cannot read roster {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise RosterError(f"Invalid TOML in {path}: {exc}") from exc
    return parse_roster(data, fee=fee)


def parse_roster(data: dict, fee: int = ADOPTION_FEE) -> Roster:
    roster = Roster()

    for i, entry in enumerate(data.get("pets", [])):
        if not isinstance(entry, dict):
            raise RosterError(f"pets[{i}] must be a table")
        name = entry.get("name")
        pet_type = entry.get("type")
        for key, value in (("name", name), ("type", pet_type)):
            if value is not None and not isinstance(value, str):
                raise RosterError(f"pets[{i}].{key} must be a string, got {value!r}")
        roster.pets.append(Pet(name, pet_type))

    seen: set[str] = set()
    for i, entry in enumerate(data.get("families", [])):
        try:
            last_name = entry["last_name"]
            capacity = entry["capacity"]
        except (KeyError, TypeError) as exc:
            raise RosterError(f"families[{i}] needs last_name and capacity") from exc
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise RosterError(f"families[{i}].capacity must be an integer, got {capacity!r}")
        if last_name in seen:
            raise RosterError(f"Duplicate family {last_name!r} in roster")
        seen.add(last_name)

        kind = entry.get("kind", "foster")
        try:
            if kind == "permanent":
                family = Family.permanent(last_name, capacity, fee=fee)
            elif kind == "foster":
                family = Family.foster(last_name, capacity)
            else:
                raise RosterError(f"families[{i}] has unknown kind {kind!r}")
        except ValueError as exc:
            raise RosterError(f"families[{i}]: {exc}") from exc
        roster.families.append(family)

    for i, entry in enumerate(data.get("adoptions", [])):
        try:
            roster.adoptions.append(AdoptionRequest(entry["family"], entry["pet"]))
        except (KeyError, TypeError) as exc:
            raise RosterError(f"adoptions[{i}] needs family and pet") from exc

    return roster
