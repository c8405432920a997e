"""Core roster service — the five command handlers.

Each handler loads the current roster through a
:class:`~employee_manager.core.protocols.RosterStore` injected at
construction time, applies a pure transform from
:mod:`employee_manager.core.roster`, and, for mutating commands only,
saves the full result in a single read-modify-write cycle.

Guarantees
----------
* No ``print()``; results are returned as models for the CLI to render.
* No filesystem access of its own.
* No locking: two processes racing on one store lose updates.
"""

from __future__ import annotations

import logging

from employee_manager.core.models import AddOutcome, RenameOutcome, Roster
from employee_manager.core.protocols import RosterStore
from employee_manager.core.roster import contains_name, filter_matching, replace_first

logger = logging.getLogger(__name__)


class RosterService:
    """Stateless service implementing list/search/add/count/update.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`RosterStore` protocol.
    """

    def __init__(self, store: RosterStore) -> None:
        self._store: RosterStore = store

    # ------------------------------------------------------------------
    # Read-only handlers
    # ------------------------------------------------------------------

    def list_employees(self) -> Roster:
        """Return the whole roster in stored order."""
        return Roster(names=tuple(self._store.load()))

    def search(self, query: str) -> Roster:
        """Return the entries containing *query*, ignoring case, in order."""
        matches = filter_matching(self._store.load(), query)
        logger.debug("Search %r matched %d record(s)", query, len(matches))
        return Roster(names=tuple(matches))

    def count(self) -> int:
        """Return the number of stored names."""
        return len(self._store.load())

    # ------------------------------------------------------------------
    # Mutating handlers
    # ------------------------------------------------------------------

    def add(self, name: str) -> AddOutcome:
        """Append *name* unless an entry already equals it ignoring case.

        Nothing is written when the name is a duplicate.
        """
        names = self._store.load()
        if contains_name(names, name):
            logger.debug("Skipping duplicate %r", name)
            return AddOutcome(name=name, added=False)

        names.append(name)
        self._store.save(names)
        return AddOutcome(name=name, added=True)

    def update(self, old_name: str, new_name: str) -> RenameOutcome:
        """Rename the first entry equal to *old_name* ignoring case.

        *new_name* is stored verbatim and is not checked against the
        other entries.  Nothing is written when no entry matches.
        """
        updated, renamed = replace_first(self._store.load(), old_name, new_name)
        if renamed:
            self._store.save(updated)
        else:
            logger.debug("No record matched %r", old_name)
        return RenameOutcome(old_name=old_name, new_name=new_name, renamed=renamed)
