"""Location inversion: how does the far end of a location address us?

Think of locations as relative file paths. The ancestry is our absolute
directory minus the last component (root to our parent). Given the path from
us to a target, the path from the target back to us climbs one level for every
junction we descended and then walks down our own ancestry, one junction per
level we climbed.

    ancestry (root to source):   Parachain(1)/AccountKey20/AccountKey20
    source to target:            ../../../Parachain(2)/AccountId32
    target to source:            ../../Parachain(1)/AccountKey20/AccountKey20

When the target sits above the part of the tree the ancestry describes, every
further level is taken to have a single child and is written ``OnlyChild``.
"""

from __future__ import annotations

import logging

from crossloc.errors import Overflow
from crossloc.location import ONLY_CHILD, Junctions, Location

logger = logging.getLogger(__name__)


class LocationInverter:
    """Inverts locations against a fixed ancestry."""

    def __init__(self, ancestry: Location) -> None:
        if ancestry.parents != 0:
            raise ValueError(f"Ancestry must descend from the root, got {ancestry}")
        self._ancestry = ancestry.copy()

    @property
    def ancestry(self) -> Location:
        return self._ancestry.copy()

    def invert_location(self, location: Location) -> Location:
        """Return the location the far end of ``location`` uses to reach us.

        Raises ``Overflow`` when the result would need more than eight junctions.
        """
        ancestry = self._ancestry.copy()
        junctions = Junctions()
        for _ in range(location.parents):
            junction = ancestry.take_first_interior()
            try:
                junctions.push_back(junction if junction is not None else ONLY_CHILD)
            except Overflow:
                logger.debug("Inverting %s against %s overflows", location, self._ancestry)
                raise
        return Location(location.length(), junctions)


def invert_location(location: Location, ancestry: Location) -> Location:
    return LocationInverter(ancestry).invert_location(location)
