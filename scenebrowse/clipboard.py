"""Clipboard text for copying and pasting directory and tag entries."""

from __future__ import annotations

from collections.abc import Iterable

from .directories import DirectoryEntry


class ClipboardFormatError(ValueError):
    """Raised when clipboard text cannot be produced or understood."""


def _undoublequote(text: str) -> str:
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def _body_lines(text: str, signature: str, empty_message: str) -> list[str]:
    if not text:
        raise ClipboardFormatError("Clipboard is empty.")
    lines = text.split("\n")
    if lines[0] != signature:
        raise ClipboardFormatError("Invalid Signature")
    if len(lines) == 1:
        raise ClipboardFormatError(empty_message)
    return lines[1:]


def format_directory_entries(entries: Iterable[DirectoryEntry], signature: str) -> str:
    """Produce clipboard text for the normal directories among *entries*."""
    lines = [f"{e.directory}:{e.display_text}" for e in entries if e.is_normal]
    if not lines:
        raise ClipboardFormatError("No normal items selected.")
    return signature + "\n" + "\n".join(lines)


def parse_directory_entries(text: str, signature: str) -> list[tuple[str, str]]:
    """Read (directory, display text) pairs from clipboard *text*."""
    result: list[tuple[str, str]] = []
    for raw in _body_lines(text, signature, "Directory entry is empty."):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(":")
        if len(parts) != 2:
            raise ClipboardFormatError(f"Illegal Directory entry '{line}'")
        directory, display = parts
        result.append((_undoublequote(directory), display))
    return result


def format_tag_entries(entries: Iterable[tuple[str, str]], signature: str) -> str:
    """Produce clipboard text for (tag, yomi) pairs."""
    lines = [f"{tag}\t{yomi}" for tag, yomi in entries]
    if not lines:
        raise ClipboardFormatError("No tags selected.")
    return signature + "\n" + "\n".join(lines)


def parse_tag_entries(text: str, signature: str) -> list[tuple[str, str]]:
    """Read (tag, yomi) pairs from clipboard *text*; a missing yomi is empty."""
    result: list[tuple[str, str]] = []
    for raw in _body_lines(text, signature, "Tag entriy is empty."):
        line = raw.strip()
        if not line:
            continue
        parts = line.split("\t")
        tag = parts[0]
        yomi = parts[1] if len(parts) > 1 else ""
        result.append((tag, yomi))
    return result