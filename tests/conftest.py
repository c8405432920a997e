"""Shared pytest fixtures and configuration for the employee-manager test suite.

Guidelines
----------
* Core tests run against an in-memory store — no filesystem.
* Infra and CLI tests only touch files under ``tmp_path``.
* Tests must not depend on the real working directory or environment.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from employee_manager.config import DATA_FILE_ENV_VAR


@pytest.fixture(autouse=True)
def _isolate_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Keep the default ``employees.txt`` and env override out of the repo."""
    monkeypatch.delenv(DATA_FILE_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def roster_file(tmp_path: Path) -> Callable[[str | None], Path]:
    """Factory: write *content* to a roster file (``None`` = leave absent)."""

    def _make(content: str | None = None) -> Path:
        path = tmp_path / "roster.txt"
        if content is not None:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _make


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting ANSI styles into captured output."""
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)
