"""Reading XPM pictures into images."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

from .colornames import text_to_rgb
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for index, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, index):
            return index
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (start := _find_unquoted(text, opener)) != -1:
        end = text.find(closer, start + len(opener))
        stop = len(text) if end == -1 else end + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them. The length of the text is kept. A comment that
    is never closed runs to the end of the text.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour in XPM colour line {line!r}") from None
    if index >= len(words):
        raise XpmError(f"no colour in XPM colour line {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM picture.

    The first string holds width, height, number of colours and characters
    per pixel; colour lines and pixel rows follow. Pixels whose colour is
    ``None`` get the value 0xFF000000; unknown pixel keys give 0.
    """
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values {header[:4]!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next_line(rows, "colour table end"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "last pixel row")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM strings held in memory."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from the quoted strings in it."""
    text = strip_comments(Path(path).read_text(encoding="latin-1"))
    return parse_xpm(match.group(1) for match in _QUOTED.finditer(text))