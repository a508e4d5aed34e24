"""Configuration loading from environment variables and crossloc.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from crossloc.location import KUSAMA, Location, NetworkId, parse_location, parse_network

_CONFIG_FILENAME = "crossloc.toml"

DEFAULT_CONVERTERS = [
    "parent_default",
    "child_parachain",
    "sibling_parachain",
    "account_id32",
    "account32_hash",
]

# The key alias that yields accounts of each width.
ALIAS_FOR_WIDTH = {32: "account_id32", 20: "account_key20"}


def default_converters(account_width: int = 32) -> list[str]:
    """Standard priority list for a namespace of ``account_width``-byte accounts."""
    alias = ALIAS_FOR_WIDTH[account_width]
    return [alias if name == "account_id32" else name for name in DEFAULT_CONVERTERS]


@dataclass
class ChainConfig:
    """Where this system sits in the tree and which network it belongs to."""

    network: NetworkId = KUSAMA
    ancestry: Location = field(default_factory=Location.here)
    account_width: int = 32

    def __post_init__(self) -> None:
        if self.ancestry.parents != 0:
            raise ValueError(f"ancestry must not have parents: {self.ancestry}")
        if self.account_width not in (20, 32):
            raise ValueError(f"account_width must be 20 or 32, got {self.account_width}")


@dataclass
class ConverterConfig:
    """Priority list of converters, first match wins.

    ``order`` of None means the standard list for the chain's account width.
    """

    order: list[str] | None = None
    sovereign_tag: str = "para"


@dataclass
class CrosslocConfig:
    """Top-level crossloc configuration."""

    chain: ChainConfig = field(default_factory=ChainConfig)
    converters: ConverterConfig = field(default_factory=ConverterConfig)
    log_level: str = "INFO"


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _parse_order(value: object) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return _split_names(value) or None
    if isinstance(value, list) and all(isinstance(name, str) for name in value):
        return [name.strip() for name in value if name.strip()] or None
    raise ValueError(f"converters.order must be a list of names or a comma list, got {value!r}")


def load_config(config_path: Path | None = None) -> CrosslocConfig:
    """Load configuration from environment variables and optional crossloc.toml.

    Priority: environment variables > crossloc.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.crossloc/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".crossloc" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    chain_data = file_data.get("chain", {})
    converter_data = file_data.get("converters", {})

    env_order = os.getenv("CROSSLOC_CONVERTERS")
    order = _parse_order(env_order if env_order else converter_data.get("order"))

    config = CrosslocConfig(
        chain=ChainConfig(
            network=parse_network(
                os.getenv("CROSSLOC_NETWORK", chain_data.get("network", "Kusama"))
            ),
            ancestry=parse_location(
                os.getenv("CROSSLOC_ANCESTRY", chain_data.get("ancestry", "."))
            ),
            account_width=int(
                os.getenv("CROSSLOC_ACCOUNT_WIDTH", chain_data.get("account_width", 32))
            ),
        ),
        converters=ConverterConfig(
            order=order,
            sovereign_tag=converter_data.get("sovereign_tag", "para"),
        ),
        log_level=os.getenv("CROSSLOC_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
