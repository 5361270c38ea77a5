"""Directory entries of a document and selecting among them."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class DirectoryEntry:
    """One row of the directory list: the "All" row, a directory, or the "Missing" row."""

    ALL = "all"
    NORMAL = "normal"
    MISSING = "missing"

    directory: str = ""
    display_text: str = ""
    kind: str = NORMAL
    selected: bool = False

    def __post_init__(self) -> None:
        if self.kind not in (self.ALL, self.NORMAL, self.MISSING):
            raise ValueError(f"unknown directory entry kind: {self.kind!r}")

    @property
    def is_all(self) -> bool:
        return self.kind == self.ALL

    @property
    def is_normal(self) -> bool:
        return self.kind == self.NORMAL

    @property
    def is_missing(self) -> bool:
        return self.kind == self.MISSING


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.normpath(os.path.abspath(path)))


def is_sub_dir(parent: str, child: str) -> bool:
    """Return True if *child* lies strictly inside *parent*."""
    parent_n = _normalize(parent)
    child_n = _normalize(child)
    if parent_n == child_n:
        return False
    prefix = parent_n if parent_n.endswith(os.sep) else parent_n + os.sep
    return child_n.startswith(prefix)


def _search(entries: Iterable[DirectoryEntry], video_dir: str, only_selected: bool) -> DirectoryEntry | None:
    found: DirectoryEntry | None = None
    for entry in entries:
        if not entry.is_normal:
            continue
        if only_selected and not entry.selected:
            continue
        if _normalize(entry.directory) == video_dir:
            return entry
        if is_sub_dir(entry.directory, video_dir):
            if found is None or len(entry.directory) > len(found.directory):
                found = entry
    return found


def find_deepest_directory(entries: Sequence[DirectoryEntry], video_file: str) -> DirectoryEntry | None:
    """Return the deepest directory entry holding *video_file*, preferring selected ones."""
    if not video_file:
        return None
    video_dir = _normalize(os.path.dirname(os.path.abspath(video_file)))
    found = _search(entries, video_dir, True)
    if found is not None:
        return found
    return _search(entries, video_dir, False)


def is_deepest_directory_selected(entries: Sequence[DirectoryEntry], video_file: str) -> bool:
    """Return True if the deepest directory holding *video_file* is selected."""
    found = find_deepest_directory(entries, video_file)
    return found is not None and found.selected


def select_all_normal(entries: Iterable[DirectoryEntry]) -> int:
    """Select every normal directory and deselect the rest; return how many are selected."""
    count = 0
    for entry in entries:
        entry.selected = entry.is_normal
        if entry.selected:
            count += 1
    return count