"""Runtime configuration: where the roster file lives.

The data-file path is resolved once at start-up and injected into the
storage layer; nothing reads it from a module global afterwards.

Resolution order
----------------
1. ``--file`` command-line option.
2. ``EMPLOYEE_MANAGER_FILE`` environment variable (ignored when blank).
3. :data:`DEFAULT_DATA_FILE`, relative to the working directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_FILE: str = "employees.txt"
DATA_FILE_ENV_VAR: str = "EMPLOYEE_MANAGER_FILE"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved settings for one invocation."""

    data_file: Path
    """Path of the comma-separated roster file."""


def resolve_settings(
    file_override: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build :class:`Settings` from the CLI override and the environment.

    *environ* defaults to :data:`os.environ`; passing a mapping keeps
    tests independent of the real process environment.
    """
    if file_override:
        return Settings(data_file=Path(file_override))

    env = os.environ if environ is None else environ
    from_env = env.get(DATA_FILE_ENV_VAR, "").strip()
    if from_env:
        return Settings(data_file=Path(from_env))

    return Settings(data_file=Path(DEFAULT_DATA_FILE))
