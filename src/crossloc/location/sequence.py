"""Capped, ordered junction sequence (root-to-leaf)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from crossloc.errors import Overflow
from crossloc.location.junctions import JUNCTION_TYPES, Junction

MAX_JUNCTIONS = 8


def _checked(junction: object) -> Junction:
    if not isinstance(junction, JUNCTION_TYPES):
        raise TypeError(f"Not a junction: {junction!r}")
    return junction  # type: ignore[return-value]


class Junctions:
    """Up to ``MAX_JUNCTIONS`` junctions, edited only at the front or back.

    Mutating methods act on this instance; callers that share a value hand out
    ``copy()`` instead.
    """

    __slots__ = ("_items",)

    def __init__(self, junctions: Iterable[Junction] = ()) -> None:
        items = [_checked(j) for j in junctions]
        if len(items) > MAX_JUNCTIONS:
            raise Overflow(f"{len(items)} junctions exceed the limit of {MAX_JUNCTIONS}")
        self._items: list[Junction] = items

    # ── Inspection ───────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Junction]:
        return iter(self._items)

    def __getitem__(self, index: int | slice) -> Junction | Junctions:
        if isinstance(index, slice):
            return Junctions(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Junctions):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Junctions({self._items!r})"

    def __str__(self) -> str:
        return "/".join(str(j) for j in self._items)

    def first(self) -> Junction | None:
        return self._items[0] if self._items else None

    def last(self) -> Junction | None:
        return self._items[-1] if self._items else None

    @property
    def is_full(self) -> bool:
        return len(self._items) >= MAX_JUNCTIONS

    # ── Editing ──────────────────────────────────────────────

    def push_back(self, junction: Junction) -> None:
        if self.is_full:
            raise Overflow(f"Cannot append {junction}: already {MAX_JUNCTIONS} junctions")
        self._items.append(_checked(junction))

    def push_front(self, junction: Junction) -> None:
        if self.is_full:
            raise Overflow(f"Cannot prepend {junction}: already {MAX_JUNCTIONS} junctions")
        self._items.insert(0, _checked(junction))

    def take_first(self) -> Junction | None:
        return self._items.pop(0) if self._items else None

    def take_last(self) -> Junction | None:
        return self._items.pop() if self._items else None

    def pushed_with(self, junction: Junction) -> Junctions:
        """Return a new sequence with ``junction`` appended."""
        result = self.copy()
        result.push_back(junction)
        return result

    def copy(self) -> Junctions:
        return Junctions(self._items)
