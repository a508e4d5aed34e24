"""One-way, hash-derived accounts for arbitrary locations."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from crossloc.codec import encode_location, encode_str
from crossloc.converters.base import AccountId
from crossloc.errors import UnsupportedDirection
from crossloc.location import Location

HASH_DOMAIN = "multiloc"


def blake2_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


@dataclass
class Account32Hash:
    """Any location maps to ``blake2_256(("multiloc", location).encode())``.

    The digest is cut to ``width`` bytes for narrower namespaces. There is no
    way back from a digest, so ``reverse`` always fails.
    """

    width: int = 32

    def __post_init__(self) -> None:
        if not 0 < self.width <= 32:
            raise ValueError(f"Account32Hash width must be 1..32, got {self.width}")

    @property
    def name(self) -> str:
        return "account32_hash"

    def convert(self, location: Location) -> AccountId:
        digest = blake2_256(encode_str(HASH_DOMAIN) + encode_location(location))
        return digest[: self.width]

    def reverse(self, account: AccountId) -> Location:
        raise UnsupportedDirection("account32_hash is one-way")
