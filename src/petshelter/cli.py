"""Command-line interface for petshelter."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from petshelter.config import Config, DEFAULT_CONFIG_TOML
from petshelter.errors import RosterError, ShelterError
from petshelter.models import Pet
from petshelter.roster import Roster, load_roster
from petshelter.shelter import Shelter, do_adoption, search_for


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every intake and adoption")
def main(verbose: bool):
    """petshelter: run pet adoptions from a roster file."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# --------------------------------------------------------------------------- #
# init
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--path", default=".", help="Project root directory")
def init(path: str):
    """Initialise .petshelter/ in the project root."""
    root = Path(path).resolve()
    config_dir = root / ".petshelter"
    config_file = config_dir / "config.toml"

    if config_dir.exists():
        click.echo(f"Already initialised at {config_dir}")
    else:
        config_dir.mkdir(parents=True)
        click.echo(f"Created {config_dir}")

    if not config_file.exists():
        config_file.write_text(DEFAULT_CONFIG_TOML)
        click.echo(f"Created {config_file}")
    else:
        click.echo(f"Config already exists: {config_file}")


# --------------------------------------------------------------------------- #
# tweet
# --------------------------------------------------------------------------- #

@main.command()
@click.argument("roster_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--path", default=None, help="Project root (default: auto-detect)")
def tweet(roster_path: Path, path: str | None):
    """Print the adoption announcement for the roster's pets."""
    config = _load_config(path)
    _, shelter = _open_shelter(roster_path, config)

    text = shelter.print_tweet()
    click.echo(text)
    if config.tweet_max_length and len(text) > config.tweet_max_length:
        click.echo(
            f"Warning: tweet is {len(text)} characters "
            f"(limit {config.tweet_max_length})",
            err=True,
        )


# --------------------------------------------------------------------------- #
# search
# --------------------------------------------------------------------------- #

@main.command()
@click.argument("roster_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("pet_type")
@click.option("--path", default=None, help="Project root (default: auto-detect)")
def search(roster_path: Path, pet_type: str, path: str | None):
    """List the roster's pets of a given type."""
    config = _load_config(path)
    _, shelter = _open_shelter(roster_path, config)

    results = search_for(shelter, pet_type)
    if not results:
        click.echo(f"No {pet_type.lower()} up for adoption.")
        return

    for pet in results:
        click.echo(f"  {pet.describe()}")


# --------------------------------------------------------------------------- #
# adopt
# --------------------------------------------------------------------------- #

@main.command()
@click.argument("roster_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--path", default=None, help="Project root (default: auto-detect)")
@click.option("--json", "as_json", is_flag=True, help="Print the outcome as JSON")
def adopt(roster_path: Path, path: str | None, as_json: bool):
    """Run every adoption listed in the roster, in order."""
    config = _load_config(path)
    roster, shelter = _open_shelter(roster_path, config)

    failures = 0
    outcomes = []
    for request in roster.adoptions:
        try:
            family = roster.family_named(request.family)
            pet = _waiting_pet(shelter, request.pet)
            do_adoption(shelter, family, pet)
        except ShelterError as exc:
            failures += 1
            outcomes.append({"family": request.family, "pet": request.pet, "error": str(exc)})
            if not as_json:
                click.echo(f"FAILED  {request.pet} -> {request.family}: {exc}", err=True)
            continue
        outcomes.append({"family": family.last_name, "pet": pet.to_dict(), "error": None})
        if not as_json:
            click.echo(f"ADOPTED {pet.describe()} -> {family.last_name}")

    if as_json:
        result = {
            "adoptions": outcomes,
            "families": [fam.to_dict() for fam in roster.families],
            "shelter": [p.to_dict() for p in shelter.pets],
        }
        click.echo(json.dumps(result, indent=2))
        if failures:
            sys.exit(1)
        return

    click.echo("")
    click.echo(f"{'Family':<16}  {'Kind':<10}  {'Pets':>9}  {'Expenses':>8}  {'Paid':>6}")
    click.echo("-" * 57)
    for fam in roster.families:
        pets = f"{len(fam.current_pets)}/{fam.capacity}"
        expenses = "-" if fam.adoption_expenses is None else str(fam.adoption_expenses)
        paid = "-" if fam.expenses_paid is None else str(fam.expenses_paid)
        click.echo(f"{fam.last_name:<16}  {fam.kind:<10}  {pets:>9}  {expenses:>8}  {paid:>6}")

    click.echo("")
    click.echo(shelter.print_tweet())

    if failures:
        sys.exit(1)


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #

def _load_config(path: str | None) -> Config:
    root = Path(path).resolve() if path else None
    try:
        config = Config.load(root) if root else Config.load_from_cwd()
        config.validate()
        return config
    except ValueError as exc:
        raise click.ClickException(f"Invalid config: {exc}") from exc


def _open_shelter(roster_path: Path, config: Config) -> tuple[Roster, Shelter]:
    try:
        roster = load_roster(roster_path, fee=config.adoption_fee)
        shelter = Shelter(adoptable_types=config.adoptable_types)
    except (RosterError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    for pet in roster.pets:
        try:
            shelter.add_pet(pet)
        except ShelterError as exc:
            click.echo(f"Skipping: {exc}", err=True)
    return roster, shelter


def _waiting_pet(shelter: Shelter, name: str) -> Pet:
    for pet in shelter.pets:
        if pet.name == name:
            return pet
    raise RosterError(f"No pet named {name!r} is waiting in the shelter")
