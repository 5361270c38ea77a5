"""Operating-system helpers: trash, process priority levels, renaming."""

from __future__ import annotations

import enum
import os
from pathlib import Path


class TrashError(Exception):
    """Raised when a file cannot be moved to the trash."""


class ThreadPriority(enum.IntEnum):
    """Task priority as stored in the settings."""

    IDLE = 0
    LOWEST = 1
    LOW = 2
    NORMAL = 3
    HIGH = 4
    HIGHEST = 5
    TIME_CRITICAL = 6
    INHERIT = 7


class CpuPriority(enum.Enum):
    NONE = "none"
    IDLE = "idle"
    BELOW_NORMAL = "belownormal"
    NORMAL = "normal"
    ABOVE_NORMAL = "abovenormal"
    HIGH = "high"


class IoPriority(enum.Enum):
    NONE = "none"
    IDLE = "idle"
    BELOW_NORMAL = "belownormal"
    NORMAL = "normal"
    ABOVE_NORMAL = "abovenormal"
    HIGH = "high"


_PRIORITY_LEVELS = {
    ThreadPriority.HIGHEST: (CpuPriority.HIGH, IoPriority.HIGH),
    ThreadPriority.HIGH: (CpuPriority.ABOVE_NORMAL, IoPriority.ABOVE_NORMAL),
    ThreadPriority.NORMAL: (CpuPriority.NORMAL, IoPriority.NORMAL),
    ThreadPriority.LOW: (CpuPriority.BELOW_NORMAL, IoPriority.BELOW_NORMAL),
    ThreadPriority.LOWEST: (CpuPriority.IDLE, IoPriority.IDLE),
    ThreadPriority.IDLE: (CpuPriority.IDLE, IoPriority.IDLE),
}


def priority_levels(priority: ThreadPriority | int) -> tuple[CpuPriority, IoPriority]:
    """Map a task priority to the CPU and I/O priorities a process gets."""
    try:
        return _PRIORITY_LEVELS[ThreadPriority(priority)]
    except (KeyError, ValueError):
        raise ValueError(f"unsupported priority: {priority!r}") from None


def find_trash_dir(home: str | os.PathLike, xdg_data_home: str | None = None) -> Path:
    """Locate a trash directory laid out as the freedesktop.org trash."""
    candidates = []
    if xdg_data_home is not None:
        candidates.append(f"{xdg_data_home}/Trash")
    candidates.append(f"{os.fspath(home)}/.local/share/Trash")
    candidates.append(f"{os.fspath(home)}/.trash")

    trash = next((Path(c) for c in candidates if Path(c).is_dir()), None)
    if trash is None:
        raise TrashError("Cant detect trash folder")
    if not (trash / "info").is_dir() or not (trash / "files").is_dir():
        raise TrashError("Trash doesnt looks like FreeDesktop.org Trash specification")
    return trash


def move_to_trash(path: str | os.PathLike, trash_dir: str | os.PathLike | None = None) -> Path:
    """Move *path* into the trash and return where it ended up."""
    if trash_dir is None:
        trash = find_trash_dir(Path.home(), os.environ.get("XDG_DATA_HOME"))
    else:
        trash = Path(trash_dir)
    info_dir = trash / "info"
    files_dir = trash / "files"

    original = Path(path)
    if not original.exists():
        raise TrashError("File doesnt exists, cant move to trash")
    original = original.absolute()

    base, _, suffix = original.name.partition(".")
    trash_name = original.name
    nr = 1
    while (info_dir / f"{trash_name}.trashinfo").exists() or (files_dir / trash_name).exists():
        nr += 1
        trash_name = f"{base}.{nr}"
        if suffix:
            trash_name += f".{suffix}"

    target = files_dir / trash_name
    try:
        os.rename(original, target)
    except OSError as exc:
        raise TrashError("move to trash failed") from exc
    return target


def default_ffprobe() -> str:
    """Return the ffprobe command used when none is configured."""
    return "ffprobe"


def default_ffmpeg() -> str:
    """Return the ffmpeg command used when none is configured."""
    return "ffmpeg"


def rename_file(old: str | os.PathLike, new: str | os.PathLike) -> None:
    """Rename *old* to *new*; raises OSError on failure."""
    os.rename(old, new)