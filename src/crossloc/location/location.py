"""The location descriptor: a relative path through the consensus-system tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from crossloc.errors import Overflow
from crossloc.location.junctions import JUNCTION_TYPES, Junction
from crossloc.location.sequence import MAX_JUNCTIONS, Junctions

MAX_PARENTS = 255


@dataclass
class Location:
    """``parents`` hops up to a shared ancestor, then down through ``interior``.

    A location carries no absolute frame: it only means something relative to
    the system holding it.
    """

    parents: int = 0
    interior: Junctions = field(default_factory=Junctions)

    def __post_init__(self) -> None:
        if isinstance(self.parents, bool) or not isinstance(self.parents, int):
            raise ValueError(f"parents must be an integer, got {self.parents!r}")
        if not 0 <= self.parents <= MAX_PARENTS:
            raise ValueError(f"parents out of range 0..{MAX_PARENTS}: {self.parents}")
        if isinstance(self.interior, JUNCTION_TYPES):
            self.interior = Junctions([self.interior])
        elif not isinstance(self.interior, Junctions):
            self.interior = Junctions(self.interior)

    # ── Constructors ─────────────────────────────────────────

    @classmethod
    def new(cls, parents: int, *junctions: Junction) -> Location:
        return cls(parents, Junctions(junctions))

    @classmethod
    def here(cls) -> Location:
        return cls(0)

    @classmethod
    def parent(cls) -> Location:
        return cls(1)

    @classmethod
    def grandparent(cls) -> Location:
        return cls(2)

    @classmethod
    def ancestor(cls, n: int) -> Location:
        return cls(n)

    @classmethod
    def parse(cls, text: str) -> Location:
        from crossloc.location.notation import parse_location

        return parse_location(text)

    # ── Accessors ────────────────────────────────────────────

    def length(self) -> int:
        return len(self.interior)

    def ascend_count(self) -> int:
        return self.parents

    def descend_sequence(self) -> Junctions:
        return self.interior

    def first_interior(self) -> Junction | None:
        return self.interior.first()

    def last_interior(self) -> Junction | None:
        return self.interior.last()

    def is_here(self) -> bool:
        return self.is_ascend_only(0)

    def is_ascend_only(self, n: int) -> bool:
        """True iff this location is exactly ``n`` parents and nothing else."""
        return self.parents == n and len(self.interior) == 0

    def copy(self) -> Location:
        return Location(self.parents, self.interior.copy())

    def __str__(self) -> str:
        if self.is_here():
            return "."
        return "/".join([".."] * self.parents + [str(j) for j in self.interior])

    # ── Mutation (caller-owned working copies only) ──────────

    def take_first_interior(self) -> Junction | None:
        return self.interior.take_first()

    def take_last_interior(self) -> Junction | None:
        return self.interior.take_last()

    def push_interior(self, junction: Junction) -> None:
        self.interior.push_back(junction)

    push_back = push_interior

    def push_front_interior(self, junction: Junction) -> None:
        self.interior.push_front(junction)

    def pushed_with(self, junction: Junction) -> Location:
        return Location(self.parents, self.interior.pushed_with(junction))

    def appended_with(self, junctions: Iterable[Junction]) -> Location:
        """Return this location extended by ``junctions``."""
        result = self.copy()
        for junction in junctions:
            result.push_interior(junction)
        return result

    # ── Composition ──────────────────────────────────────────

    def prepended_with(self, prefix: Location) -> Location:
        """Re-express this location as seen from the far end of ``prefix``.

        ``prefix`` leads from the new point of view to the context this
        location was relative to. Each of our parents cancels the junction of
        ``prefix`` nearest that context; parents left over climb above
        ``prefix``'s own parents.
        """
        cancelled = min(self.parents, len(prefix.interior))
        kept = list(prefix.interior)[: len(prefix.interior) - cancelled]

        final_interior = len(kept) + len(self.interior)
        if final_interior > MAX_JUNCTIONS:
            raise Overflow(
                f"Prepending {prefix} to {self} needs {final_interior} junctions"
            )
        final_parents = prefix.parents + (self.parents - cancelled)
        if final_parents > MAX_PARENTS:
            raise Overflow(f"Prepending {prefix} to {self} needs {final_parents} parents")

        return Location(final_parents, Junctions([*kept, *self.interior]))
