"""SCALE-style byte encoding of the location model.

Encode-only: the bytes feed the domain-separated account hash. Decoding wire
data belongs to whoever transports locations.
"""

from __future__ import annotations

from crossloc.location.junctions import (
    BODY_ID_KINDS,
    BODY_PART_KINDS,
    JUNCTION_TYPES,
    NETWORK_KINDS,
    AccountId32,
    AccountIndex64,
    AccountKey20,
    BodyId,
    BodyPart,
    GeneralIndex,
    GeneralKey,
    Junction,
    NetworkId,
    OnlyChild,
    PalletInstance,
    Parachain,
    Plurality,
)
from crossloc.location.location import Location
from crossloc.location.sequence import Junctions


def encode_compact(value: int) -> bytes:
    """SCALE compact integer: 1, 2 or 4 bytes for small values, else big-integer mode."""
    if value < 0:
        raise ValueError(f"Cannot compact-encode a negative number: {value}")
    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    length = (value.bit_length() + 7) // 8
    if length > 67:
        raise ValueError(f"Value too large for compact encoding: {value}")
    return bytes([((length - 4) << 2) | 0b11]) + value.to_bytes(length, "little")


def encode_uint(value: int, width: int) -> bytes:
    return value.to_bytes(width, "little")


def encode_bytes(data: bytes) -> bytes:
    """Length-prefixed byte vector."""
    return encode_compact(len(data)) + bytes(data)


def encode_str(text: str) -> bytes:
    return encode_bytes(text.encode("utf-8"))


def encode_network(network: NetworkId) -> bytes:
    out = bytes([NETWORK_KINDS.index(network.kind)])
    if network.kind == "Named":
        out += encode_bytes(network.name)
    return out


def encode_body_id(body: BodyId) -> bytes:
    out = bytes([BODY_ID_KINDS.index(body.kind)])
    if body.kind == "Named":
        out += encode_bytes(body.name)
    elif body.kind == "Index":
        out += encode_compact(body.index)
    return out


def encode_body_part(part: BodyPart) -> bytes:
    out = bytes([BODY_PART_KINDS.index(part.kind)])
    if part.kind == "Members":
        out += encode_compact(part.count)
    elif part.is_proportion:
        out += encode_compact(part.nom) + encode_compact(part.denom)
    return out


def encode_junction(junction: Junction) -> bytes:
    tag = bytes([JUNCTION_TYPES.index(type(junction))])
    if isinstance(junction, Parachain):
        return tag + encode_compact(junction.id)
    if isinstance(junction, AccountId32):
        return tag + encode_network(junction.network) + junction.id
    if isinstance(junction, AccountIndex64):
        return tag + encode_network(junction.network) + encode_compact(junction.index)
    if isinstance(junction, AccountKey20):
        return tag + encode_network(junction.network) + junction.key
    if isinstance(junction, PalletInstance):
        return tag + encode_uint(junction.index, 1)
    if isinstance(junction, GeneralIndex):
        return tag + encode_compact(junction.index)
    if isinstance(junction, GeneralKey):
        return tag + encode_bytes(junction.key)
    if isinstance(junction, OnlyChild):
        return tag
    if isinstance(junction, Plurality):
        return tag + encode_body_id(junction.id) + encode_body_part(junction.part)
    raise TypeError(f"Not a junction: {junction!r}")


def encode_junctions(junctions: Junctions) -> bytes:
    # Variant index is the arity: Here, X1 .. X8.
    return bytes([len(junctions)]) + b"".join(encode_junction(j) for j in junctions)


def encode_location(location: Location) -> bytes:
    return encode_uint(location.parents, 1) + encode_junctions(location.interior)
