"""Composing and checking new names for video files."""

from __future__ import annotations

_ILLEGAL_CHARS = frozenset('<>:"|?*')


class InvalidFilenameError(ValueError):
    """Raised when a file name cannot be used."""


def compose_filename(basename: str, ext: str) -> str:
    """Join *basename* and *ext*; empty if both parts are empty."""
    if not basename and not ext:
        return ""
    return f"{basename}.{ext}"


def validate_filename(name: str) -> str:
    """Return *name* if it can be used as a file name, else raise InvalidFilenameError."""
    if not name:
        raise InvalidFilenameError("Name is empty.")
    if "/" in name or "\\" in name:
        raise InvalidFilenameError("Filename cound not have '/' or/and '\\'")
    if name in (".", ".."):
        raise InvalidFilenameError(f"'{name}' is not a file name.")
    bad = sorted({c for c in name if c in _ILLEGAL_CHARS or ord(c) < 0x20})
    if bad:
        shown = " ".join(repr(c) for c in bad)
        raise InvalidFilenameError(f"Filename contains illegal characters: {shown}")
    return name