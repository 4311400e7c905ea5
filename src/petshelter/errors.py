"""Exceptions raised by shelter and family operations."""

from __future__ import annotations


class ShelterError(Exception):
    """Base class for all adoption workflow errors."""


class IneligiblePet(ShelterError):
    """The pet does not pass the adoptability check."""


class CapacityExceeded(ShelterError):
    """The family cannot take another pet."""


class NotFound(ShelterError):
    """The pet is not held by the shelter or family it was looked up in."""


class DuplicatePet(ShelterError):
    """The pet is already held by the container it was added to."""


class RosterError(ShelterError):
    """A roster file is malformed or references unknown entries."""
