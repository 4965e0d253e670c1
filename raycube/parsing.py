"""Reading and checking ``.cub`` scene descriptions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from .utils import is_empty_line, valid_extension

IDENTIFIERS: tuple[str, ...] = ("NO", "SO", "WE", "EA", "F", "C")
TEXTURE_IDENTIFIERS: tuple[str, ...] = ("NO", "SO", "WE", "EA")
SPAWN_CHARS = "NSEW"

_MAP_LINE_CHARS = set("01 " + SPAWN_CHARS)
_MAP_CHARS = set("01\t " + SPAWN_CHARS)
_DIGITS = set("0123456789")
_BLANKS = " \t\n"


class ParseError(ValueError):
    """Raised when a scene description is not valid."""


@dataclass(frozen=True)
class CubConfig:
    """Everything read from a valid scene description."""

    north: str
    south: str
    west: str
    east: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    grid: tuple[str, ...]
    spawn: tuple[int, int] | None


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without their newline characters."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as err:
        raise ParseError(f"cannot open {os.fspath(path)}: {err.strerror or err}") from err
    if not text:
        raise ParseError(f"{os.fspath(path)} is empty")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _starts_with_identifier(text: str) -> bool:
    return any(text.startswith(prefix) for prefix in IDENTIFIERS)


def _is_map_line(text: str) -> bool:
    rest = text.lstrip(" \t")
    return all(char in _MAP_LINE_CHARS for char in rest) and (
        "0" in rest or "1" in rest
    )


def first_map_line(lines: Sequence[str]) -> int:
    """Return the index of the first line of the map, or -1 when there is none."""
    for index, line in enumerate(lines):
        rest = line.lstrip(" \t")
        if is_empty_line(rest) or _starts_with_identifier(rest):
            continue
        if _is_map_line(rest):
            return index
    return -1


def count_identifiers(lines: Sequence[str], map_start: int) -> int:
    """Count lines that start with an identifier; none may follow the map start."""
    count = 0
    for index, line in enumerate(lines):
        if _starts_with_identifier(line):
            if index > map_start:
                raise ParseError("Invalid map position")
            count += 1
    return count


def check_flag_position(lines: Sequence[str]) -> int:
    """Check that every identifier comes before the map; return the map start."""
    map_start = first_map_line(lines)
    if count_identifiers(lines, map_start) < len(IDENTIFIERS):
        raise ParseError("Missing textures or colors")
    return map_start


def extract_textures(lines: Iterable[str]) -> dict[str, str]:
    """Return the value given to each identifier, with blanks removed.

    The value starts two characters after the start of the identifier; when
    an identifier appears more than once, the last line wins.
    """
    rows = list(lines)
    values: dict[str, str] = {}
    for prefix in IDENTIFIERS:
        for line in rows:
            rest = line.lstrip(" \t")
            if rest.startswith(prefix):
                value = rest[2:].lstrip(" \t")
                values[prefix] = "".join(c for c in value if c not in _BLANKS)
        if prefix not in values:
            raise ParseError(f"Missing textures or colors: {prefix}")
    return values


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Read a ``red,green,blue`` colour with each part between 0 and 255."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise ParseError("Wrong format (numbers,numbers,numbers)")
    for part in parts:
        if not all(char in _DIGITS for char in part):
            raise ParseError(f"RGB colors only take digits : {part}")
    values = []
    for part in parts:
        value = int(part)
        if not 0 <= value <= 255:
            raise ParseError(f"Invalid RGB number (0 - 255) : {part}")
        values.append(value)
    red, green, blue = values
    return red, green, blue


def check_texture_extensions(textures: Mapping[str, str]) -> None:
    """Require the four wall textures to be ``.xpm`` files."""
    for prefix in TEXTURE_IDENTIFIERS:
        path = textures[prefix]
        if not valid_extension(".xpm", path):
            raise ParseError(f"Invalid texture extension (.xpm) : {path}")


def copy_map_lines(lines: Sequence[str], map_start: int) -> list[str]:
    """Return the map lines, checking their characters and the spawn count."""
    if map_start < 0:
        raise ParseError("No map found")
    spawns = 0
    result = []
    for line in lines[map_start:]:
        for char in line:
            if char not in _MAP_CHARS:
                raise ParseError("Invalid character in the map")
            if char in SPAWN_CHARS:
                spawns += 1
            if spawns > 1:
                raise ParseError("Too many spawn points")
        result.append(line)
    return result


def flood_fill(grid: list[list[str]], x: int, y: int) -> bool:
    """Mark every cell reachable from (x, y) with ``V``.

    Walls stop the fill. Returns False when the fill reaches a space or
    leaves the map, True when it stays enclosed.
    """
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cy >= len(grid) or cx >= len(grid[cy]):
            return False
        cell = grid[cy][cx]
        if cell == " ":
            return False
        if cell in ("1", "V"):
            continue
        grid[cy][cx] = "V"
        stack.extend(((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)))
    return True


def walkable(grid: Iterable[Sequence[str]]) -> bool:
    """Return True when no spawn point can reach the outside of the map."""
    cells = [list(row) for row in grid]
    for row_index, row in enumerate(cells):
        for col_index, char in enumerate(row):
            if char in SPAWN_CHARS and not flood_fill(cells, col_index, row_index):
                return False
    return True


def _find_spawn(grid: Sequence[str]) -> tuple[int, int] | None:
    for row_index, row in enumerate(grid):
        for col_index, char in enumerate(row):
            if char in SPAWN_CHARS:
                return row_index, col_index
    return None


def parse_cub(path: str | os.PathLike[str]) -> CubConfig:
    """Read and check a ``.cub`` file."""
    name = os.fspath(path)
    if not valid_extension(".cub", name):
        raise ParseError("Wrong map extension (.cub)")
    lines = read_lines(name)
    map_start = check_flag_position(lines)
    textures = extract_textures(lines)
    check_texture_extensions(textures)
    floor = parse_rgb(textures["F"])
    ceiling = parse_rgb(textures["C"])
    grid = copy_map_lines(lines, map_start)
    if not walkable(grid):
        raise ParseError("Invalid map. The player could walk into the void")
    return CubConfig(
        north=textures["NO"],
        south=textures["SO"],
        west=textures["WE"],
        east=textures["EA"],
        floor=floor,
        ceiling=ceiling,
        grid=tuple(grid),
        spawn=_find_spawn(grid),
    )