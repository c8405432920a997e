"""Allow ``python -m employee_manager`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m employee_manager`` behaves identically to the
``employee-manager`` console script.
"""

from __future__ import annotations

from employee_manager.cli.app import cli

if __name__ == "__main__":
    cli()
