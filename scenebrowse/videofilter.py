"""Pick out new and renamed video files in a scanned directory."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

_VIDEO_EXTENSIONS = frozenset(
    {
        "3g2", "3gp", "amv", "asf", "avi", "avs", "divx", "drc",
        "f4a", "f4b", "f4p", "f4v", "flv", "gif", "gifv", "m2v",
        "m4p", "m4v", "mkv", "mng", "mov", "mp2", "mp4", "mpe",
        "mpeg", "mpg", "mpv", "mxf", "nsv", "ogg", "ogm", "ogv",
        "qt", "rm", "rmvb", "roq", "svi", "swf", "vob", "webm",
        "wmv", "yuv",
    }
)


@dataclass(frozen=True)
class KnownEntry:
    """A file already recorded in the database."""

    name: str
    size: int
    salient: str


@dataclass
class FilterResult:
    """Files to add and database entries to rename for one directory."""

    directory: str
    new_files: list[str] = field(default_factory=list)
    renames: list[tuple[str, str]] = field(default_factory=list)


def is_video_extension(file: str) -> bool:
    """Return True if *file* has a known video extension."""
    _, dot, ext = file.rpartition(".")
    if not dot:
        return False
    return ext.lower() in _VIDEO_EXTENSIONS


def _file_size(path: str) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def filter_files(
    directory: str,
    files: Iterable[str],
    entries: Sequence[KnownEntry],
    salient_of: Callable[[str, int], str],
) -> FilterResult:
    """Compare *files* found in *directory* with the known *entries*.

    Unchanged files are skipped. A file whose name is unknown but whose
    size and salient match an entry whose file is gone is reported as a
    rename of that entry; every other video file is reported as new.
    """
    result = FilterResult(os.path.realpath(directory))
    by_name: dict[str, KnownEntry] = {}
    by_salient: dict[str, KnownEntry] = {}
    for entry in entries:
        by_name.setdefault(entry.name, entry)
        by_salient.setdefault(entry.salient, entry)

    for name in files:
        if not is_video_extension(name):
            continue
        full = os.path.abspath(os.path.join(directory, name))
        size = _file_size(full)
        salient = salient_of(full, size)

        known = by_name.get(name)
        if known is not None:
            if known.size == size and known.salient == salient:
                continue
        else:
            same = by_salient.get(salient)
            if (
                same is not None
                and same.size == size
                and not os.path.exists(os.path.join(directory, same.name))
            ):
                result.renames.append((same.name, name))
                continue
        result.new_files.append(name)
    return result