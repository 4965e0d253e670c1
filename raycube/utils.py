"""Small string checks shared by the map reader."""

from __future__ import annotations


def valid_extension(extension: str, name: str) -> bool:
    """Return True when ``name`` ends with ``extension``."""
    return name.endswith(extension)


def is_empty_line(text: str) -> bool:
    """Return True when ``text`` holds only spaces and tabs, up to a newline."""
    rest = text.lstrip(" \t")
    return rest == "" or rest.startswith("\n")