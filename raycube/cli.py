"""Command line entry point: check a scene file and start the game."""

from __future__ import annotations

import sys
from typing import Sequence

from .game import Game
from .parsing import CubConfig, ParseError, parse_cub


def run(path: str) -> CubConfig:
    """Read the scene at ``path``, play it, and return what was read."""
    config = parse_cub(path)
    Game(config).run()
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the one scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error \n Don't be silly", file=sys.stderr)
        return 1
    try:
        run(args[0])
    except ParseError as err:
        print(f"Error \n {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())