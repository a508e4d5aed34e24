"""The parent context owns the default (all-zero) account."""

from __future__ import annotations

from dataclasses import dataclass

from crossloc.converters.base import AccountId, check_width
from crossloc.errors import NoMatch
from crossloc.location import Location


@dataclass
class ParentIsDefault:
    """``..`` converts to the default account and back; nothing else does."""

    width: int = 32

    @property
    def name(self) -> str:
        return "parent_default"

    @property
    def default_account(self) -> AccountId:
        return bytes(self.width)

    def convert(self, location: Location) -> AccountId:
        if location.is_ascend_only(1):
            return self.default_account
        raise NoMatch(f"parent_default: {location} is not the parent")

    def reverse(self, account: AccountId) -> Location:
        check_width(account, self.width, self.name)
        if bytes(account) == self.default_account:
            return Location.parent()
        raise NoMatch("parent_default: not the default account")
