"""Re-expressing locations, and the assets they identify, in another context."""

from __future__ import annotations

from dataclasses import dataclass

from crossloc.inverter import LocationInverter
from crossloc.location import Location


def reanchored(location: Location, inverted: Location) -> Location:
    """``location`` as seen from the context that reaches us through ``inverted``.

    ``inverted`` is what ``LocationInverter.invert_location`` returns for the
    destination. Raises ``Overflow`` if the result does not fit.
    """
    return location.prepended_with(inverted)


def reanchor_for(location: Location, dest: Location, inverter: LocationInverter) -> Location:
    """Invert ``dest`` and reanchor ``location`` to it in one step."""
    return reanchored(location, inverter.invert_location(dest))


@dataclass
class Asset:
    """A fungible amount of the asset identified by a location."""

    id: Location
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Asset amount cannot be negative: {self.amount}")

    def reanchored(self, inverted: Location) -> Asset:
        return Asset(reanchored(self.id, inverted), self.amount)

    def __str__(self) -> str:
        return f"{self.amount} of {self.id}"
