"""employee-manager — maintain a comma-separated roster of employee names.

A small command-line tool with a strict layered architecture:
``cli`` → ``core`` ← ``infra``.
"""

from employee_manager.version import __version__

__all__: list[str] = ["__version__"]
