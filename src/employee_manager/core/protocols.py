"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on concrete
implementations, so handlers can be exercised against an in-memory
store in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class RosterStore(Protocol):
    """Contract for roster persistence backends.

    Any object implementing :meth:`load` and :meth:`save` satisfies this
    protocol structurally (no explicit inheritance required).
    Implementations must map backend failures to
    :class:`~employee_manager.exceptions.StorageError`.
    """

    def load(self) -> list[str]:
        """Return the stored names in order; empty when nothing is stored.

        Raises
        ------
        StorageError
            When the backing store exists but cannot be read.
        """
        ...  # pragma: no cover

    def save(self, names: Sequence[str]) -> None:
        """Replace the stored roster with *names*.

        Raises
        ------
        StorageError
            When the backing store cannot be written.
        """
        ...  # pragma: no cover
