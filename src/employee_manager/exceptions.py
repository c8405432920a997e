"""Custom exception hierarchy for employee-manager.

All exceptions that cross layer boundaries must inherit from
:class:`EmployeeManagerError`.  Raw ``OSError`` / ``UnicodeDecodeError``
must NEVER propagate beyond the infrastructure layer.  They are caught
there and re-raised as :class:`StorageError`.

Hierarchy
---------
EmployeeManagerError
├── UsageError
└── StorageError
"""

from __future__ import annotations


class EmployeeManagerError(Exception):
    """Base exception for all employee-manager errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and pick the matching exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(EmployeeManagerError):
    """Raised for a missing/unknown command or missing command arguments."""


# --- Storage ---------------------------------------------------------------

class StorageError(EmployeeManagerError):
    """Raised when the roster file cannot be read or written."""
