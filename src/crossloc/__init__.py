"""crossloc — relative addressing for a tree of nested consensus systems.

Locations, account conversion schemes, location inversion and reanchoring.
"""

from crossloc.core import Crossloc
from crossloc.errors import (
    ConversionError,
    LocationError,
    NoConverterMatched,
    NoMatch,
    NotationError,
    Overflow,
    UnsupportedDirection,
)
from crossloc.inverter import LocationInverter, invert_location
from crossloc.location import Junctions, Location
from crossloc.reanchor import Asset, reanchor_for, reanchored

__all__ = [
    "Asset",
    "ConversionError",
    "Crossloc",
    "Junctions",
    "Location",
    "LocationError",
    "LocationInverter",
    "NoConverterMatched",
    "NoMatch",
    "NotationError",
    "Overflow",
    "UnsupportedDirection",
    "invert_location",
    "reanchor_for",
    "reanchored",
]
