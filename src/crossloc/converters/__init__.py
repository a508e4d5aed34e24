"""Location/account conversion schemes and the ordered chain that combines them."""

from crossloc.converters.aliases import AccountId32Aliases, AccountKey20Aliases
from crossloc.converters.base import AccountId, Converter, convert_with, reverse_with
from crossloc.converters.hashed import Account32Hash
from crossloc.converters.parachain import (
    PARA_TAG,
    SIBLING_TAG,
    ChildParachainConvertsVia,
    ParachainAccountDerivation,
    SiblingParachainConvertsVia,
)
from crossloc.converters.parent import ParentIsDefault

__all__ = [
    "PARA_TAG",
    "SIBLING_TAG",
    "Account32Hash",
    "AccountId",
    "AccountId32Aliases",
    "AccountKey20Aliases",
    "ChildParachainConvertsVia",
    "Converter",
    "ParachainAccountDerivation",
    "ParentIsDefault",
    "SiblingParachainConvertsVia",
    "convert_with",
    "reverse_with",
]
