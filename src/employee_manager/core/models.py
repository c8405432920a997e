"""Domain models for employee-manager.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Roster:
    """Immutable, ordered collection of employee names.

    Order is insertion order as read from storage.  Convenience dunder
    methods make the roster usable in boolean, length and ``for``
    contexts.
    """

    names: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.names)

    def __bool__(self) -> bool:
        return len(self.names) > 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)


# ---------------------------------------------------------------------------
# Command outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AddOutcome:
    """Result of an add request."""

    name: str
    """The name as supplied by the caller."""

    added: bool
    """``False`` when a case-insensitive duplicate already existed."""


@dataclass(frozen=True, slots=True)
class RenameOutcome:
    """Result of a rename request."""

    old_name: str
    new_name: str

    renamed: bool
    """``False`` when no record matched *old_name*."""
