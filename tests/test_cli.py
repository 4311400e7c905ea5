"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from petshelter.cli import main

ROSTER = """\
[[pets]]
name = "Fluffy"
type = "Dog"

[[pets]]
name = "Scruffy"
type = "Cat"

[[pets]]
name = "Ruby"
type = "Snake"

[[pets]]
name = "Ginger"
type = "Chicken"

[[families]]
last_name = "Smith"
capacity = 4
kind = "permanent"

[[families]]
last_name = "Brown"
capacity = 1

[[adoptions]]
family = "Smith"
pet = "Fluffy"

[[adoptions]]
family = "Smith"
pet = "Scruffy"
"""


@pytest.fixture
def project(tmp_path):
    (tmp_path / ".petshelter").mkdir()
    roster = tmp_path / "roster.toml"
    roster.write_text(ROSTER)
    return tmp_path, roster


def _run(args):
    return CliRunner().invoke(main, args)


def test_init_writes_config(tmp_path):
    result = _run(["init", "--path", str(tmp_path)])
    assert result.exit_code == 0
    assert (tmp_path / ".petshelter" / "config.toml").exists()

    again = _run(["init", "--path", str(tmp_path)])
    assert "Config already exists" in again.output


def test_tweet_skips_ineligible_pets(project):
    root, roster = project
    result = _run(["tweet", str(roster), "--path", str(root)])
    assert result.exit_code == 0
    assert (
        "Today we have 3 pets up for adoption: "
        "Fluffy (dog), Scruffy (cat), Ginger (chicken)"
    ) in result.output


def test_tweet_length_warning(project):
    root, roster = project
    (root / ".petshelter" / "config.toml").write_text("[tweet]\nmax_length = 20\n")
    result = _run(["tweet", str(roster), "--path", str(root)])
    assert result.exit_code == 0
    assert "Warning: tweet is" in result.output


def test_search(project):
    root, roster = project
    result = _run(["search", str(roster), "cat", "--path", str(root)])
    assert result.exit_code == 0
    assert "Scruffy (cat)" in result.output
    assert "Fluffy" not in result.output

    none = _run(["search", str(roster), "Rabbit", "--path", str(root)])
    assert "No rabbit up for adoption." in none.output


def test_adopt_charges_permanent_family(project):
    root, roster = project
    result = _run(["adopt", str(roster), "--path", str(root)])
    assert result.exit_code == 0
    assert "ADOPTED Fluffy (dog) -> Smith" in result.output
    assert "ADOPTED Scruffy (cat) -> Smith" in result.output
    smith_row = next(line for line in result.output.splitlines() if line.startswith("Smith"))
    assert smith_row.split() == ["Smith", "permanent", "2/4", "50", "0"]
    assert "Today we have 1 pets up for adoption: Ginger (chicken)" in result.output


def test_adopt_reports_failures(project):
    root, roster = project
    roster.write_text(
        ROSTER
        + '\n[[adoptions]]\nfamily = "Brown"\npet = "Ginger"\n'
        + '\n[[adoptions]]\nfamily = "Brown"\npet = "Fluffy"\n'
    )
    result = _run(["adopt", str(roster), "--path", str(root)])
    assert result.exit_code == 1
    assert "ADOPTED Ginger (chicken) -> Brown" in result.output
    assert "FAILED  Fluffy -> Brown" in result.output


def test_invalid_config_is_reported(project):
    root, roster = project
    (root / ".petshelter" / "config.toml").write_text("[adoption]\nfee = -1\n")
    result = _run(["tweet", str(roster), "--path", str(root)])
    assert result.exit_code != 0
    assert "fee" in result.output


def test_bad_tweet_length_is_reported(project):
    root, roster = project
    (root / ".petshelter" / "config.toml").write_text('[tweet]\nmax_length = "long"\n')
    result = _run(["tweet", str(roster), "--path", str(root)])
    assert result.exit_code == 1
    assert "tweet.max_length" in result.output
    assert not isinstance(result.exception, TypeError)


def test_malformed_pet_type_is_reported(project):
    root, roster = project
    roster.write_text('[[pets]]\nname = "Ginger"\ntype = 5\n')
    result = _run(["tweet", str(roster), "--path", str(root)])
    assert result.exit_code == 1
    assert "pets[0].type must be a string" in result.output


def test_non_integer_capacity_is_reported(project):
    root, roster = project
    roster.write_text('[[families]]\nlast_name = "Smith"\ncapacity = "3"\n')
    result = _run(["adopt", str(roster), "--path", str(root)])
    assert result.exit_code == 1
    assert "capacity must be an integer" in result.output


def test_adopt_json_output(project):
    root, roster = project
    roster.write_text(
        '[[pets]]\nname = "Fluffy"\ntype = "Dog"\n\n'
        '[[pets]]\nname = "Scruffy"\ntype = "Cat"\n\n'
        '[[families]]\nlast_name = "Smith"\ncapacity = 4\nkind = "permanent"\n\n'
        '[[adoptions]]\nfamily = "Smith"\npet = "Fluffy"\n'
    )
    result = _run(["adopt", str(roster), "--path", str(root), "--json"])
    assert result.exit_code == 0

    data = json.loads(result.output)
    assert data["adoptions"][0]["family"] == "Smith"
    assert data["adoptions"][0]["pet"]["name"] == "Fluffy"
    assert data["adoptions"][0]["error"] is None
    smith = data["families"][0]
    assert smith["adoption_expenses"] == 25
    assert smith["expenses_paid"] == 0
    assert [p["name"] for p in smith["current_pets"]] == ["Fluffy"]
    assert [p["name"] for p in data["shelter"]] == ["Scruffy"]
