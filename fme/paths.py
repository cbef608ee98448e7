# python
"""
fme/paths.py
Path grammar for batch arguments: "/" or "/seg1/seg2/..." with no empty segments.
"""
from typing import Sequence, Tuple

from .errors import InvalidPathError

SEPARATOR = "/"

Path = Tuple[str, ...]


def split_path(text: str) -> Path:
    """
    Split an absolute path into its segments.

    "/" is the root and yields an empty tuple. Raises InvalidPathError for
    an empty string, a missing leading separator, or any empty segment
    (doubled or trailing separator).
    """
    if not text:
        raise InvalidPathError(text, "path is empty")
    if not text.startswith(SEPARATOR):
        raise InvalidPathError(text, f"path must start with '{SEPARATOR}'")
    if text == SEPARATOR:
        return ()
    segments = tuple(text[1:].split(SEPARATOR))
    if any(not seg for seg in segments):
        raise InvalidPathError(text, "path contains an empty segment")
    return segments


def join_path(segments: Sequence[str]) -> str:
    return SEPARATOR + SEPARATOR.join(segments)


def base_name(segments: Sequence[str]) -> str:
    """Last segment of a non-root path."""
    if not segments:
        raise ValueError("the root path has no base name")
    return segments[-1]


def parent_of(segments: Sequence[str]) -> Path:
    return tuple(segments[:-1])


def is_within(inner: Sequence[str], outer: Sequence[str]) -> bool:
    """True if `inner` equals `outer` or lies below it."""
    return len(inner) >= len(outer) and tuple(inner[: len(outer)]) == tuple(outer)
