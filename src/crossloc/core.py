"""Crossloc context — what an execution engine holds for one system.

Responsibilities:
1. Hold the system's configured ancestry and network (read-only after init)
2. Converter registry — name → converter
3. Ordered conversion — try converters in the configured priority order
4. Location inversion against the ancestry
5. Reanchoring locations and assets for a destination
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from crossloc.config import CrosslocConfig, default_converters
from crossloc.converters import (
    Account32Hash,
    AccountId32Aliases,
    AccountKey20Aliases,
    ChildParachainConvertsVia,
    ParachainAccountDerivation,
    ParentIsDefault,
    SiblingParachainConvertsVia,
    convert_with,
    reverse_with,
)
from crossloc.inverter import LocationInverter
from crossloc.reanchor import Asset, reanchor_for, reanchored

if TYPE_CHECKING:
    from crossloc.converters import AccountId, Converter
    from crossloc.location import Location

logger = logging.getLogger(__name__)


class Crossloc:
    """Relative addressing for one system in the consensus tree."""

    def __init__(self, config: CrosslocConfig) -> None:
        self.config = config
        self.inverter = LocationInverter(config.chain.ancestry)
        self._converters: dict[str, Converter] = {}

    @classmethod
    def from_config(cls, config: CrosslocConfig) -> Crossloc:
        """Build a context with the standard converters for the chain's account width.

        Only the key alias whose accounts have that width is registered.
        """
        ctx = cls(config)
        chain = config.chain
        derivation = ParachainAccountDerivation(
            tag=config.converters.sovereign_tag.encode(), width=chain.account_width
        )
        ctx.add_converter(ParentIsDefault(width=chain.account_width))
        ctx.add_converter(ChildParachainConvertsVia(derivation))
        ctx.add_converter(SiblingParachainConvertsVia(derivation))
        if chain.account_width == 32:
            ctx.add_converter(AccountId32Aliases(chain.network))
        else:
            ctx.add_converter(AccountKey20Aliases(chain.network))
        ctx.add_converter(Account32Hash(width=chain.account_width))
        return ctx

    # ── Converter management ─────────────────────────────────

    def add_converter(self, converter: Converter) -> None:
        self._converters[converter.name] = converter
        logger.info("Registered converter: %s", converter.name)

    def _chain(self) -> list[Converter]:
        chain = []
        order = self.config.converters.order or default_converters(
            self.config.chain.account_width
        )
        for name in order:
            converter = self._converters.get(name)
            if not converter:
                raise RuntimeError(
                    f"Converter '{name}' not registered. Available: {list(self._converters)}"
                )
            chain.append(converter)
        return chain

    # ── Conversion ───────────────────────────────────────────

    def convert(self, location: Location) -> AccountId:
        """Map a location to a local account using the first matching converter."""
        return convert_with(self._chain(), location)

    def reverse(self, account: AccountId) -> Location:
        """Map a local account back to a location using the first matching converter."""
        return reverse_with(self._chain(), account)

    # ── Inversion & reanchoring ──────────────────────────────

    def invert_location(self, location: Location) -> Location:
        return self.inverter.invert_location(location)

    def reanchor(self, location: Location, inverted: Location) -> Location:
        return reanchored(location, inverted)

    def reanchor_for(self, location: Location, dest: Location) -> Location:
        """Express ``location`` (relative to us) as ``dest`` will see it."""
        return reanchor_for(location, dest, self.inverter)

    def reanchor_asset(self, asset: Asset, dest: Location) -> Asset:
        return asset.reanchored(self.invert_location(dest))
