"""Sovereign accounts of child and sibling parachains.

A parachain's account is its 4-byte type tag followed by the little-endian id,
zero-padded to the account width. The layout is recoverable: an account that
starts with the tag and ends in zeros decodes back to the id.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from crossloc.converters.base import AccountId, check_width
from crossloc.errors import NoMatch
from crossloc.location import Location, Parachain

PARA_TAG = b"para"
SIBLING_TAG = b"sibl"


@dataclass(frozen=True)
class ParachainAccountDerivation:
    tag: bytes = PARA_TAG
    width: int = 32

    def __post_init__(self) -> None:
        if len(self.tag) != 4:
            raise ValueError(f"Type tag must be 4 bytes, got {self.tag!r}")
        if self.width < 8:
            raise ValueError(f"Account width {self.width} cannot hold a tag and an id")

    def into_account(self, para_id: int) -> AccountId:
        return (self.tag + para_id.to_bytes(4, "little")).ljust(self.width, b"\x00")

    def try_from_account(self, account: AccountId) -> int | None:
        account = bytes(account)
        if len(account) != self.width or account[:4] != self.tag:
            return None
        if any(account[8:]):
            return None
        return int.from_bytes(account[4:8], "little")


def _single_parachain(location: Location, parents: int) -> int | None:
    if location.parents != parents or location.length() != 1:
        return None
    junction = location.first_interior()
    return junction.id if isinstance(junction, Parachain) else None


@dataclass
class ChildParachainConvertsVia:
    """``Parachain(id)`` directly below us, as seen by the relay."""

    derivation: ParachainAccountDerivation = field(default_factory=ParachainAccountDerivation)

    @property
    def name(self) -> str:
        return "child_parachain"

    def convert(self, location: Location) -> AccountId:
        para_id = _single_parachain(location, 0)
        if para_id is None:
            raise NoMatch(f"child_parachain: {location} is not a child parachain")
        return self.derivation.into_account(para_id)

    def reverse(self, account: AccountId) -> Location:
        check_width(account, self.derivation.width, self.name)
        para_id = self.derivation.try_from_account(account)
        if para_id is None:
            raise NoMatch("child_parachain: not a parachain sovereign account")
        return Location(0, Parachain(para_id))


@dataclass
class SiblingParachainConvertsVia:
    """``../Parachain(id)``: a parachain sharing our parent."""

    derivation: ParachainAccountDerivation = field(default_factory=ParachainAccountDerivation)

    @property
    def name(self) -> str:
        return "sibling_parachain"

    def convert(self, location: Location) -> AccountId:
        para_id = _single_parachain(location, 1)
        if para_id is None:
            raise NoMatch(f"sibling_parachain: {location} is not a sibling parachain")
        return self.derivation.into_account(para_id)

    def reverse(self, account: AccountId) -> Location:
        check_width(account, self.derivation.width, self.name)
        para_id = self.derivation.try_from_account(account)
        if para_id is None:
            raise NoMatch("sibling_parachain: not a parachain sovereign account")
        return Location(1, Parachain(para_id))
