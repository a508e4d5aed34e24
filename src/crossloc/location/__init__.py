"""Location model: networks, junctions, junction sequences and locations."""

from crossloc.location.junctions import (
    ANY,
    KUSAMA,
    ONLY_CHILD,
    POLKADOT,
    AccountId32,
    AccountIndex64,
    AccountKey20,
    BodyId,
    BodyPart,
    GeneralIndex,
    GeneralKey,
    Junction,
    NetworkId,
    OnlyChild,
    PalletInstance,
    Parachain,
    Plurality,
)
from crossloc.location.location import MAX_PARENTS, Location
from crossloc.location.notation import parse_junction, parse_location, parse_network
from crossloc.location.sequence import MAX_JUNCTIONS, Junctions

__all__ = [
    "ANY",
    "KUSAMA",
    "MAX_JUNCTIONS",
    "MAX_PARENTS",
    "ONLY_CHILD",
    "POLKADOT",
    "AccountId32",
    "AccountIndex64",
    "AccountKey20",
    "BodyId",
    "BodyPart",
    "GeneralIndex",
    "GeneralKey",
    "Junction",
    "Junctions",
    "Location",
    "NetworkId",
    "OnlyChild",
    "PalletInstance",
    "Parachain",
    "Plurality",
    "parse_junction",
    "parse_location",
    "parse_network",
]
