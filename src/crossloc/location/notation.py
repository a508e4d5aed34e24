"""Path-like text form of locations.

    .                                   Here
    ..                                  Parent
    ../Parachain(2)                     a sibling
    ../../Parachain(2)/AccountId32(Any,0x00..00)

``str(location)`` produces this form and ``parse_location`` reads it back.
"""

from __future__ import annotations

import re

from crossloc.errors import NotationError
from crossloc.location.junctions import (
    AccountId32,
    AccountIndex64,
    AccountKey20,
    BodyId,
    BodyPart,
    GeneralIndex,
    GeneralKey,
    Junction,
    NetworkId,
    ONLY_CHILD,
    PalletInstance,
    Parachain,
    Plurality,
)
from crossloc.location.location import Location
from crossloc.location.sequence import Junctions

_JUNCTION_RE = re.compile(r"^([A-Za-z][A-Za-z0-9]*)(?:\((.*)\))?$")
_RATIO_RE = re.compile(r"^(\d+)/(\d+)$")

_PART_ALIASES = {
    "Fraction": "Fraction",
    "AtLeast": "AtLeastProportion",
    "AtLeastProportion": "AtLeastProportion",
    "MoreThan": "MoreThanProportion",
    "MoreThanProportion": "MoreThanProportion",
}


def _split_top_level(text: str, sep: str) -> list[str]:
    """Split on ``sep`` outside parentheses."""
    parts: list[str] = []
    depth = 0
    current = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise NotationError(f"Unbalanced ')' in {text!r}")
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise NotationError(f"Unbalanced '(' in {text!r}")
    parts.append("".join(current))
    return [p.strip() for p in parts]


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise NotationError(f"Invalid {what}: {text!r}") from None


def _parse_hex(text: str, what: str) -> bytes:
    if not text.startswith(("0x", "0X")):
        raise NotationError(f"{what} must be 0x-prefixed hex, got {text!r}")
    try:
        return bytes.fromhex(text[2:])
    except ValueError:
        raise NotationError(f"Invalid hex for {what}: {text!r}") from None


def parse_network(text: str) -> NetworkId:
    text = text.strip()
    if text.startswith("Named:"):
        return NetworkId.named(_parse_hex(text[len("Named:"):], "network name"))
    try:
        return NetworkId(text)
    except ValueError:
        raise NotationError(f"Unknown network: {text!r}") from None


def _parse_body_id(text: str) -> BodyId:
    kind, _, value = text.partition(":")
    try:
        if kind == "Named":
            return BodyId("Named", name=_parse_hex(value, "body name"))
        if kind == "Index":
            return BodyId("Index", index=_parse_int(value, "body index"))
        if value:
            raise NotationError(f"Body id {kind} takes no value: {text!r}")
        return BodyId(kind)
    except ValueError as e:
        if isinstance(e, NotationError):
            raise
        raise NotationError(f"Invalid body id {text!r}: {e}") from None


def _parse_body_part(text: str) -> BodyPart:
    kind, _, value = text.partition(":")
    try:
        if kind == "Voice" and not value:
            return BodyPart("Voice")
        if kind == "Members":
            return BodyPart("Members", count=_parse_int(value, "member count"))
        if kind in _PART_ALIASES:
            m = _RATIO_RE.match(value)
            if not m:
                raise NotationError(f"Body part {kind} needs N/D, got {value!r}")
            return BodyPart(_PART_ALIASES[kind], nom=int(m.group(1)), denom=int(m.group(2)))
    except ValueError as e:
        if isinstance(e, NotationError):
            raise
        raise NotationError(f"Invalid body part {text!r}: {e}") from None
    raise NotationError(f"Unknown body part: {text!r}")


def _expect_args(name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        raise NotationError(f"{name} takes {count} argument(s), got {len(args)}")


def parse_junction(text: str) -> Junction:
    m = _JUNCTION_RE.match(text.strip())
    if not m:
        raise NotationError(f"Malformed junction: {text!r}")
    name, raw = m.group(1), m.group(2)
    args = _split_top_level(raw, ",") if raw else []

    try:
        if name == "Parachain":
            _expect_args(name, args, 1)
            return Parachain(_parse_int(args[0], "parachain id"))
        if name == "PalletInstance":
            _expect_args(name, args, 1)
            return PalletInstance(_parse_int(args[0], "pallet index"))
        if name == "GeneralIndex":
            _expect_args(name, args, 1)
            return GeneralIndex(_parse_int(args[0], "general index"))
        if name == "GeneralKey":
            _expect_args(name, args, 1)
            return GeneralKey(_parse_hex(args[0], "general key"))
        if name == "AccountId32":
            _expect_args(name, args, 2)
            return AccountId32(parse_network(args[0]), _parse_hex(args[1], "account id"))
        if name == "AccountKey20":
            _expect_args(name, args, 2)
            return AccountKey20(parse_network(args[0]), _parse_hex(args[1], "account key"))
        if name == "AccountIndex64":
            _expect_args(name, args, 2)
            return AccountIndex64(parse_network(args[0]), _parse_int(args[1], "account index"))
        if name == "OnlyChild":
            if raw:
                raise NotationError("OnlyChild takes no arguments")
            return ONLY_CHILD
        if name == "Plurality":
            if not args:
                return Plurality()
            _expect_args(name, args, 2)
            return Plurality(_parse_body_id(args[0]), _parse_body_part(args[1]))
    except ValueError as e:
        if isinstance(e, NotationError):
            raise
        raise NotationError(f"Invalid junction {text!r}: {e}") from None
    raise NotationError(f"Unknown junction kind: {name!r}")


def parse_location(text: str) -> Location:
    """Parse ``../Parachain(2)/GeneralIndex(42)``-style text into a Location."""
    text = text.strip()
    if text in ("", ".", "Here"):
        return Location.here()

    parents = 0
    junctions: list[Junction] = []
    for segment in _split_top_level(text, "/"):
        if segment in ("..", "Parent"):
            if junctions:
                raise NotationError(f"'..' after a junction in {text!r}")
            parents += 1
        elif segment in ("", "."):
            raise NotationError(f"Empty segment in {text!r}")
        else:
            junctions.append(parse_junction(segment))

    try:
        return Location(parents, Junctions(junctions))
    except ValueError as e:
        raise NotationError(f"Invalid location {text!r}: {e}") from None
