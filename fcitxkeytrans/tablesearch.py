"""Binary search over sorted tables of (code, keysym) pairs."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

__all__ = ["lookup"]


def lookup(table: Sequence[tuple[int, int]], key: int) -> int | None:
    """Return the value paired with ``key`` in a table sorted by its first column.

    When the key appears more than once, the first entry wins. Returns
    ``None`` when the key is not in the table.
    """
    index = bisect_left(table, key, key=lambda entry: entry[0])
    if index < len(table) and table[index][0] == key:
        return table[index][1]
    return None