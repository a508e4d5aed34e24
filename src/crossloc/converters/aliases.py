"""Local key junctions that stand for the key itself.

Forward conversion accepts the wildcard network or the configured one; the
reverse direction always names the configured network.
"""

from __future__ import annotations

from dataclasses import dataclass

from crossloc.converters.base import AccountId, check_width
from crossloc.errors import NoMatch
from crossloc.location import AccountId32, AccountKey20, Location, NetworkId


def _check_network(network: NetworkId, converter: str) -> None:
    if network.is_any:
        raise ValueError(f"{converter} needs a concrete network, not Any")


def _accepts(junction_network: NetworkId, configured: NetworkId) -> bool:
    return junction_network.is_any or junction_network == configured


@dataclass
class AccountId32Aliases:
    """``AccountId32(network, id)`` at depth 1 is the 32-byte account ``id``."""

    network: NetworkId

    def __post_init__(self) -> None:
        _check_network(self.network, self.name)

    @property
    def name(self) -> str:
        return "account_id32"

    def convert(self, location: Location) -> AccountId:
        junction = location.first_interior()
        if (
            location.parents == 0
            and location.length() == 1
            and isinstance(junction, AccountId32)
            and _accepts(junction.network, self.network)
        ):
            return junction.id
        raise NoMatch(f"account_id32: {location} is not a local 32-byte account")

    def reverse(self, account: AccountId) -> Location:
        check_width(account, 32, self.name)
        return Location(0, AccountId32(self.network, account))


@dataclass
class AccountKey20Aliases:
    """``AccountKey20(network, key)`` at depth 1 is the 20-byte account ``key``."""

    network: NetworkId

    def __post_init__(self) -> None:
        _check_network(self.network, self.name)

    @property
    def name(self) -> str:
        return "account_key20"

    def convert(self, location: Location) -> AccountId:
        junction = location.first_interior()
        if (
            location.parents == 0
            and location.length() == 1
            and isinstance(junction, AccountKey20)
            and _accepts(junction.network, self.network)
        ):
            return junction.key
        raise NoMatch(f"account_key20: {location} is not a local 20-byte account")

    def reverse(self, account: AccountId) -> Location:
        check_width(account, 20, self.name)
        return Location(0, AccountKey20(self.network, account))
