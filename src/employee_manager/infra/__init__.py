"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~employee_manager.exceptions.StorageError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from employee_manager.infra.file_store import FileRosterStore

__all__: list[str] = ["FileRosterStore"]
