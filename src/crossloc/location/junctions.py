"""Junction kinds: the single descent steps a location is built from.

The family is closed. Every algorithm that inspects junctions (codec,
notation, converters) dispatches over ``JUNCTION_TYPES``; adding a kind means
extending that tuple and every matcher with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Variant order doubles as the codec's enum index.
NETWORK_KINDS = ("Any", "Named", "Polkadot", "Kusama")
BODY_ID_KINDS = ("Unit", "Named", "Index", "Executive", "Technical", "Legislative", "Judicial")
BODY_PART_KINDS = ("Voice", "Members", "Fraction", "AtLeastProportion", "MoreThanProportion")


def _check_uint(what: str, value: int, bits: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{what} out of range for u{bits}: {value}")


def _as_bytes(obj: object, field_name: str, width: int | None = None) -> bytes:
    value = getattr(obj, field_name)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"{type(obj).__name__}.{field_name} must be bytes, got {value!r}")
    value = bytes(value)
    if width is not None and len(value) != width:
        raise ValueError(
            f"{type(obj).__name__}.{field_name} must be {width} bytes, got {len(value)}"
        )
    object.__setattr__(obj, field_name, value)
    return value


# ── Network identifiers ──────────────────────────────────────


@dataclass(frozen=True)
class NetworkId:
    """Network a key-based junction belongs to. ``Any`` is the wildcard."""

    kind: str = "Any"
    name: bytes = b""

    def __post_init__(self) -> None:
        if self.kind not in NETWORK_KINDS:
            raise ValueError(f"Unknown network kind: {self.kind!r}")
        name = _as_bytes(self, "name")
        if self.kind != "Named" and name:
            raise ValueError(f"Network {self.kind} takes no name")

    @classmethod
    def named(cls, name: bytes) -> NetworkId:
        return cls("Named", name)

    @property
    def is_any(self) -> bool:
        return self.kind == "Any"

    def __str__(self) -> str:
        if self.kind == "Named":
            return f"Named:0x{self.name.hex()}"
        return self.kind


ANY = NetworkId("Any")
POLKADOT = NetworkId("Polkadot")
KUSAMA = NetworkId("Kusama")


# ── Plurality bodies ─────────────────────────────────────────


@dataclass(frozen=True)
class BodyId:
    """Identity of a collective body (council, technical committee, ...)."""

    kind: str = "Unit"
    name: bytes = b""
    index: int = 0

    def __post_init__(self) -> None:
        if self.kind not in BODY_ID_KINDS:
            raise ValueError(f"Unknown body id kind: {self.kind!r}")
        _as_bytes(self, "name")
        _check_uint("BodyId index", self.index, 32)
        if self.kind != "Named" and self.name:
            raise ValueError(f"Body id {self.kind} takes no name")
        if self.kind != "Index" and self.index:
            raise ValueError(f"Body id {self.kind} takes no index")

    def __str__(self) -> str:
        if self.kind == "Named":
            return f"Named:0x{self.name.hex()}"
        if self.kind == "Index":
            return f"Index:{self.index}"
        return self.kind


@dataclass(frozen=True)
class BodyPart:
    """Which part of a body is acting: its voice, a count or a proportion."""

    kind: str = "Voice"
    count: int = 0
    nom: int = 0
    denom: int = 0

    def __post_init__(self) -> None:
        if self.kind not in BODY_PART_KINDS:
            raise ValueError(f"Unknown body part kind: {self.kind!r}")
        for what in ("count", "nom", "denom"):
            _check_uint(f"BodyPart {what}", getattr(self, what), 32)
        if self.kind != "Members" and self.count:
            raise ValueError(f"Body part {self.kind} takes no count")
        if self.kind in ("Voice", "Members") and (self.nom or self.denom):
            raise ValueError(f"Body part {self.kind} takes no proportion")

    @property
    def is_proportion(self) -> bool:
        return self.kind in ("Fraction", "AtLeastProportion", "MoreThanProportion")

    def __str__(self) -> str:
        if self.kind == "Members":
            return f"Members:{self.count}"
        if self.kind == "Fraction":
            return f"Fraction:{self.nom}/{self.denom}"
        if self.kind == "AtLeastProportion":
            return f"AtLeast:{self.nom}/{self.denom}"
        if self.kind == "MoreThanProportion":
            return f"MoreThan:{self.nom}/{self.denom}"
        return self.kind


# ── Junctions ────────────────────────────────────────────────


@dataclass(frozen=True)
class Parachain:
    """A sub-system of the current context, by numeric id."""

    id: int

    def __post_init__(self) -> None:
        _check_uint("Parachain id", self.id, 32)

    def __str__(self) -> str:
        return f"Parachain({self.id})"


@dataclass(frozen=True)
class AccountId32:
    network: NetworkId
    id: bytes

    def __post_init__(self) -> None:
        _as_bytes(self, "id", 32)

    def __str__(self) -> str:
        return f"AccountId32({self.network},0x{self.id.hex()})"


@dataclass(frozen=True)
class AccountIndex64:
    network: NetworkId
    index: int

    def __post_init__(self) -> None:
        _check_uint("AccountIndex64 index", self.index, 64)

    def __str__(self) -> str:
        return f"AccountIndex64({self.network},{self.index})"


@dataclass(frozen=True)
class AccountKey20:
    network: NetworkId
    key: bytes

    def __post_init__(self) -> None:
        _as_bytes(self, "key", 20)

    def __str__(self) -> str:
        return f"AccountKey20({self.network},0x{self.key.hex()})"


@dataclass(frozen=True)
class PalletInstance:
    index: int

    def __post_init__(self) -> None:
        _check_uint("PalletInstance index", self.index, 8)

    def __str__(self) -> str:
        return f"PalletInstance({self.index})"


@dataclass(frozen=True)
class GeneralIndex:
    index: int

    def __post_init__(self) -> None:
        _check_uint("GeneralIndex index", self.index, 128)

    def __str__(self) -> str:
        return f"GeneralIndex({self.index})"


@dataclass(frozen=True)
class GeneralKey:
    key: bytes

    def __post_init__(self) -> None:
        _as_bytes(self, "key")

    def __str__(self) -> str:
        return f"GeneralKey(0x{self.key.hex()})"


@dataclass(frozen=True)
class OnlyChild:
    """The sole, otherwise unspecified, descendant of the current context."""

    def __str__(self) -> str:
        return "OnlyChild"


@dataclass(frozen=True)
class Plurality:
    """A group of entities acting together, e.g. a council majority."""

    id: BodyId = BodyId()
    part: BodyPart = BodyPart()

    def __str__(self) -> str:
        return f"Plurality({self.id},{self.part})"


Junction = Union[
    Parachain,
    AccountId32,
    AccountIndex64,
    AccountKey20,
    PalletInstance,
    GeneralIndex,
    GeneralKey,
    OnlyChild,
    Plurality,
]

# Codec enum order.
JUNCTION_TYPES: tuple[type, ...] = (
    Parachain,
    AccountId32,
    AccountIndex64,
    AccountKey20,
    PalletInstance,
    GeneralIndex,
    GeneralKey,
    OnlyChild,
    Plurality,
)

ONLY_CHILD = OnlyChild()
