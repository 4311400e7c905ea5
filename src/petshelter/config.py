"""Configuration loading and defaults."""

from __future__ import annotations

import tomllib
from pathlib import Path

from petshelter.family import ADOPTION_FEE
from petshelter.models import ADOPTABLE_TYPES


DEFAULT_CONFIG = {
    "adoption": {
        "fee": ADOPTION_FEE,
        "adoptable_types": sorted(ADOPTABLE_TYPES),
    },
    "tweet": {
        "max_length": 0,  # 0 disables the length warning
    },
}


class Config:
    def __init__(self, data: dict, config_dir: Path):
        self._data = data
        self.config_dir = config_dir

    @classmethod
    def load(cls, project_root: Path) -> "Config":
        config_dir = project_root / ".petshelter"
        config_file = config_dir / "config.toml"

        data = _deep_merge(DEFAULT_CONFIG, {})

        if config_file.exists():
            with open(config_file, "rb") as f:
                user_data = tomllib.load(f)
            data = _deep_merge(DEFAULT_CONFIG, user_data)

        return cls(data, config_dir)

    @classmethod
    def load_from_cwd(cls) -> "Config":
        root = _find_project_root(Path.cwd())
        return cls.load(root)

    # --- adoption ---
    @property
    def adoption_fee(self) -> int:
        fee = self._data["adoption"]["fee"]
        if isinstance(fee, bool) or not isinstance(fee, int) or fee < 0:
            raise ValueError(f"adoption.fee must be a non-negative integer, got {fee!r}")
        return fee

    @property
    def adoptable_types(self) -> frozenset[str]:
        types = frozenset(t.lower() for t in self._data["adoption"]["adoptable_types"])
        unknown = types - ADOPTABLE_TYPES
        if unknown:
            raise ValueError(
                f"adoption.adoptable_types has unsupported types: {', '.join(sorted(unknown))}"
            )
        return types

    # --- tweet ---
    @property
    def tweet_max_length(self) -> int:
        limit = self._data["tweet"]["max_length"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(
                f"tweet.max_length must be a non-negative integer, got {limit!r}"
            )
        return limit

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        self.adoption_fee
        self.adoptable_types
        self.tweet_max_length


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _find_project_root(start: Path) -> Path:
    """Walk up to find the directory containing .petshelter/ or .git/."""
    current = start.resolve()
    while True:
        if (current / ".petshelter").exists() or (current / ".git").exists():
            return current
        parent = current.parent
        if parent == current:
            return start.resolve()
        current = parent


DEFAULT_CONFIG_TOML = """\
[adoption]
fee             = 25
adoptable_types = ["cat", "chicken", "dog", "mouse", "rabbit"]

[tweet]
max_length = 0
"""
