"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from employee_manager.core.models import AddOutcome, RenameOutcome, Roster
from employee_manager.core.protocols import RosterStore
from employee_manager.core.roster_service import RosterService

__all__: list[str] = [
    "AddOutcome",
    "RenameOutcome",
    "Roster",
    "RosterService",
    "RosterStore",
]
