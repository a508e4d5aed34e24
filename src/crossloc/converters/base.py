"""Converter protocol and the ordered fallback chain."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from crossloc.errors import ConversionError, NoConverterMatched, NoMatch
from crossloc.location import Location

logger = logging.getLogger(__name__)

# Opaque, fixed-width account identifier local to one namespace.
AccountId = bytes


@runtime_checkable
class Converter(Protocol):
    """Protocol that all location/account conversion schemes implement.

    Both directions raise ``NoMatch`` when the input does not have the shape
    the scheme understands, and ``UnsupportedDirection`` when the scheme is
    one-way.
    """

    @property
    def name(self) -> str: ...

    def convert(self, location: Location) -> AccountId:
        """Forward: location to account identifier."""
        ...

    def reverse(self, account: AccountId) -> Location:
        """Backward: account identifier to location."""
        ...


def check_width(account: AccountId, width: int, converter: str) -> None:
    if not isinstance(account, (bytes, bytearray)) or len(account) != width:
        raise NoMatch(f"{converter}: expected a {width}-byte account")


def convert_with(converters: Iterable[Converter], location: Location) -> AccountId:
    """Try each converter in priority order; the first success wins."""
    attempts: list[tuple[str, ConversionError]] = []
    for converter in converters:
        try:
            account = converter.convert(location)
        except ConversionError as e:
            logger.debug("Converter %s skipped %s: %s", converter.name, location, e)
            attempts.append((converter.name, e))
            continue
        logger.debug("Converter %s mapped %s to 0x%s", converter.name, location, account.hex())
        return account
    logger.debug("No converter matched %s", location)
    raise NoConverterMatched(location, attempts)


def reverse_with(converters: Iterable[Converter], account: AccountId) -> Location:
    """Reverse counterpart of ``convert_with``."""
    attempts: list[tuple[str, ConversionError]] = []
    for converter in converters:
        try:
            location = converter.reverse(account)
        except ConversionError as e:
            logger.debug("Converter %s skipped 0x%s: %s", converter.name, account.hex(), e)
            attempts.append((converter.name, e))
            continue
        logger.debug("Converter %s mapped 0x%s to %s", converter.name, account.hex(), location)
        return location
    logger.debug("No converter matched account 0x%s", account.hex())
    raise NoConverterMatched(f"0x{account.hex()}", attempts)
