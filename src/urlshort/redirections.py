"""Redirection table and its reduction to a path→URL mapping.

A ``Redirections`` table is the ordered list a decoder produces. It is
consumed by reducing it to a plain dict, where a later entry for the
same path replaces an earlier one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Redirection:
    """A single ``path`` → ``url`` entry.

    Neither field is validated: empty strings are kept as-is and the URL
    is never parsed.
    """

    path: str
    url: str


@dataclass(frozen=True, slots=True)
class Redirections:
    """Immutable, ordered table of redirections.

    Duplicate paths are allowed here; ``map()`` resolves them.
    """

    entries: tuple[Redirection, ...] = ()

    @classmethod
    def of(cls, entries: Iterable[Redirection]) -> Redirections:
        """Build a table from any iterable of entries, keeping order."""
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[Redirection]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def map(self) -> dict[str, str]:
        """Reduce to a path→URL dict; the last entry for a path wins."""
        return reduce_to_mapping(self.entries)


def reduce_to_mapping(table: Iterable[Redirection]) -> dict[str, str]:
    """Reduce *table* to a fresh dict, in order, last write winning."""
    result: dict[str, str] = {}
    for redirection in table:
        result[redirection.path] = redirection.url
    return result
