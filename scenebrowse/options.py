"""User options for thumbnails, tasks, display templates and tools."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .consts import (
    DEFAULT_ITEM_MAIN_TEXT,
    DEFAULT_ITEM_SUB_TEXT,
    MINIMUM_THREAD_COUNT,
    THUMB_HEIGHT_DEFAULT,
    THUMB_WIDTH_DEFAULT,
)
from .osd import default_ffmpeg, default_ffprobe


class ImageCacheType(enum.IntEnum):
    """How thumbnail images are kept in memory."""

    NEVER = 0
    PER_DIRECTORY = 1
    ALWAYS = 2


_THUMB_COUNTS = (3, 5)
_SCROLL_MODES = ("item", "pixel")
# Task priorities offered to the user; -1 leaves the priority untouched.
_TASK_PRIORITIES = (-1, 5, 4, 3, 2, 1, 0)
_TAG_MENU_FORMATS = range(3)

_ILLEGAL_EXT_CHARS = frozenset('\\/:*?"<>|.')

_TITLE_TEMPLATE_TARGETS = (
    ("id", "ID"),
    ("name", "Filename"),
    ("directory", "Directory"),
    ("size", "Size"),
    ("atime", "Last Access"),
    ("atime_date", "Last Access (date)"),
    ("atime_time", "Last Access (time)"),
    ("wtime", "Last Modified"),
    ("wtime_date", "Last Modified (date)"),
    ("wtime_time", "Last Modified (time)"),
    ("duration", "Duration"),
    ("format", "Format"),
    ("bitrate", "Bitrate"),
    ("acodec", "Audio codec"),
    ("vcodec", "Video codec"),
    ("resolution", "Resolution"),
    ("fps", "fps"),
    ("opencount", "Open count"),
    ("tags", "Tags"),
)


def title_template_targets() -> list[tuple[str, str]]:
    """Return the placeholders usable in title and info templates with their labels."""
    return [("${" + key + "}", label) for key, label in _TITLE_TEMPLATE_TARGETS]


def is_legal_file_ext(ext: str) -> bool:
    """Return True if *ext* can serve as a file extension."""
    if not ext or not ext.strip():
        return False
    return not any(c in _ILLEGAL_EXT_CHARS or ord(c) < 0x20 for c in ext)


@dataclass
class Options:
    """The set of options the user can edit.

    Values outside the choices offered fall back to the first choice,
    the way a selection list would show them.
    """

    main_text: str = DEFAULT_ITEM_MAIN_TEXT
    sub_text: str = DEFAULT_ITEM_SUB_TEXT
    image_cache: ImageCacheType = ImageCacheType.NEVER
    max_getdir_threads: int = MINIMUM_THREAD_COUNT
    max_thumbnail_threads: int = MINIMUM_THREAD_COUNT
    thumb_count: int = 3
    thumb_width: int = THUMB_WIDTH_DEFAULT
    thumb_height: int = THUMB_HEIGHT_DEFAULT
    thumb_format: str = "jpg"
    scroll_mode: str = "item"
    task_priority: int = -1
    tag_menu_format: int = 0
    use_custom_db_dir: bool = False
    db_dir: str = ""
    limit_items: bool = False
    max_rows: int = 0
    open_last_document: bool = True
    ffprobe: str = default_ffprobe()
    ffmpeg: str = default_ffmpeg()
    show_tag_count: bool = True

    def __post_init__(self) -> None:
        self.image_cache = ImageCacheType(self.image_cache)
        if self.thumb_count not in _THUMB_COUNTS:
            self.thumb_count = _THUMB_COUNTS[0]
        if self.scroll_mode not in _SCROLL_MODES:
            self.scroll_mode = _SCROLL_MODES[0]
        if self.task_priority not in _TASK_PRIORITIES:
            self.task_priority = _TASK_PRIORITIES[0]
        if self.tag_menu_format not in _TAG_MENU_FORMATS:
            self.tag_menu_format = 0

    def validate(self) -> None:
        """Raise ValueError if the thumbnail image format is unusable."""
        if not self.thumb_format:
            raise ValueError("Thumbnail Image format must be specified.")
        if not is_legal_file_ext(self.thumb_format):
            raise ValueError("Thumbnail Image format is illegal.")

    def thumb_size_changed(self, original_width: int, original_height: int) -> bool:
        """Return True if the thumbnail size differs, so thumbnails must be recreated."""
        return not (original_width == self.thumb_width and original_height == self.thumb_height)