"""Entry point: python -m crossloc <command> ...

- invert <location>            How the far end of <location> addresses us
- convert <location>           Local account for <location>
- reverse <0xaccount>          Location for a local account
- reanchor <location> <dest>   <location> as seen from <dest>

Ancestry, network and converter order come from crossloc.toml / environment.
"""

from __future__ import annotations

import logging
import sys

from crossloc.config import load_config
from crossloc.errors import LocationError

USAGE = """\
Usage: python -m crossloc <command> [args]
  invert <location>            Inverted location for the configured ancestry
  convert <location>           Account id for a location
  reverse <0xaccount>          Location for an account id
  reanchor <location> <dest>   Location as seen from dest"""

_ARITY = {"invert": 1, "convert": 1, "reverse": 1, "reanchor": 2}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_account(text: str) -> bytes:
    if not text.startswith(("0x", "0X")):
        raise ValueError(f"Account must be 0x-prefixed hex: {text!r}")
    return bytes.fromhex(text[2:])


def run(cmd: str, args: list[str]) -> str:
    """Execute one command and return what it prints."""
    from crossloc.core import Crossloc
    from crossloc.location import parse_location

    config = load_config()
    _setup_logging(config.log_level)
    ctx = Crossloc.from_config(config)

    if cmd == "invert":
        return str(ctx.invert_location(parse_location(args[0])))
    if cmd == "convert":
        return "0x" + ctx.convert(parse_location(args[0])).hex()
    if cmd == "reverse":
        return str(ctx.reverse(_parse_account(args[0])))
    if cmd == "reanchor":
        return str(ctx.reanchor_for(parse_location(args[0]), parse_location(args[1])))
    raise ValueError(f"Unknown command: {cmd}")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    cmd = argv[0] if argv else ""
    args = argv[1:]

    if cmd not in _ARITY or len(args) != _ARITY[cmd]:
        print(USAGE)
        sys.exit(1)

    try:
        print(run(cmd, args))
    except (LocationError, ValueError) as e:
        print(f"crossloc: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
