"""Pure roster parsing, serialisation and list transforms.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

On-disk format: one line, names joined by ``,``, no trailing separator,
no quoting.  A name containing a literal comma therefore becomes two
records on the next read.
"""

from __future__ import annotations

from collections.abc import Sequence

SEPARATOR: str = ","


# ---------------------------------------------------------------------------
# Text <-> records
# ---------------------------------------------------------------------------

def parse_roster(text: str) -> list[str]:
    """Split stored *text* into trimmed, non-empty names in file order."""
    content = text.strip()
    if not content:
        return []
    tokens = (token.strip() for token in content.split(SEPARATOR))
    return [token for token in tokens if token]


def format_roster(names: Sequence[str]) -> str:
    """Join *names* into the single stored line."""
    return SEPARATOR.join(names)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def filter_matching(names: Sequence[str], query: str) -> list[str]:
    """Return names containing *query* as a case-insensitive substring."""
    needle = query.lower()
    return [name for name in names if needle in name.lower()]


def contains_name(names: Sequence[str], name: str) -> bool:
    """Whether any entry equals *name*, ignoring case."""
    wanted = name.lower()
    return any(existing.lower() == wanted for existing in names)


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------

def replace_first(
    names: Sequence[str],
    old_name: str,
    new_name: str,
) -> tuple[list[str], bool]:
    """Replace the first case-insensitive match of *old_name*.

    Returns the new list and whether a replacement happened.  All other
    entries are carried over unchanged; *new_name* is stored verbatim.
    """
    wanted = old_name.lower()
    result = list(names)
    for index, existing in enumerate(result):
        if existing.lower() == wanted:
            result[index] = new_name
            return result, True
    return result, False
