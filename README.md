# scenebrowse

Building blocks for a desktop browser of video collections. This package holds the parts that work without a GUI.

## Modules

- `scenebrowse.consts`: setting key names, default values and limits.
  - `clamp_thread_count(value)` keeps a worker thread count between `MINIMUM_THREAD_COUNT` (1) and `MAXIMUM_THREAD_COUNT` (32).
- `scenebrowse.osd`: operating-system helpers.
  - `find_trash_dir(home, xdg_data_home=None)` looks for a trash directory in the FreeDesktop.org layout. It checks `$XDG_DATA_HOME/Trash`, then `~/.local/share/Trash`, then `~/.trash`. The directory it picks must contain `info/` and `files/`.
  - `move_to_trash(path, trash_dir=None)` moves a file into `files/` of the trash. A clashing name becomes `name.2.ext`, `name.3.ext` and so on. It returns the new path. It does not write a `.trashinfo` record.
  - Both functions raise `TrashError` when they fail.
  - `priority_levels(priority)` maps a `ThreadPriority` to a `(CpuPriority, IoPriority)` pair. It raises `ValueError` for `TIME_CRITICAL` and `INHERIT`.
  - `default_ffprobe()` and `default_ffmpeg()` return `"ffprobe"` and `"ffmpeg"`.
  - `rename_file(old, new)` renames a file and raises `OSError` if the rename fails.
- `scenebrowse.videofilter`: picks out the files in a directory that need scanning.
  - `is_video_extension(file)` tests a name against the known video extensions. The test ignores case.
  - `filter_files(directory, files, entries, salient_of)` compares a directory listing with the known `KnownEntry` records. It skips unchanged files and returns a `FilterResult` with two lists:
    - `new_files`: video files to add.
    - `renames`: `(old, new)` pairs. A file is taken to be a rename when its size and salient match an entry whose file is gone.
- `scenebrowse.options`: user options.
  - `Options` is a dataclass of the editable options. Values outside the offered choices fall back to the first choice. `validate()` checks the thumbnail image format. `thumb_size_changed(width, height)` tells whether the thumbnails must be recreated.
  - `ImageCacheType` enum: `NEVER`, `PER_DIRECTORY`, `ALWAYS`.
  - `title_template_targets()` lists the `${...}` placeholders with their labels.
  - `is_legal_file_ext(ext)` tells whether a string can serve as a file extension.
- `scenebrowse.rename`:
  - `compose_filename(basename, ext)` joins the two parts with a dot, or returns an empty string when both parts are empty.
  - `validate_filename(name)` returns the name, or raises `InvalidFilenameError` if the name is empty, contains separators or illegal characters, or is `.` or `..`.
- `scenebrowse.externaltools`: programs to launch on a video.
  - `ExternalTool` holds a name, executable, arguments and a `count_as_open` flag.
  - `ExternalToolList` is an ordered, editable list of tools with `has_name`, `add_new` (names the new tool "New Item N"), `remove`, `move_up` and `move_down`.
  - `argument_placeholders()` lists the `${...}` placeholders usable in the executable or arguments.
- `scenebrowse.directories`:
  - `DirectoryEntry` is one row of a directory list. Its kind is `ALL`, `NORMAL` or `MISSING`.
  - `is_sub_dir(parent, child)` tells whether one path lies strictly inside another.
  - `find_deepest_directory(entries, video_file)` finds the deepest directory holding a video, preferring selected entries. `is_deepest_directory_selected(entries, video_file)` tells whether that directory is selected.
  - `select_all_normal(entries)` selects every normal entry, deselects the rest, and returns how many are selected.
- `scenebrowse.clipboard`: the text copied and pasted for directory and tag entries. The first line is a signature that the caller supplies.
  - `format_directory_entries` and `parse_directory_entries` handle `directory:display` lines.
  - `format_tag_entries` and `parse_tag_entries` handle `tag<TAB>yomi` lines.
  - Malformed text raises `ClipboardFormatError`.

## Example

```python
from scenebrowse.consts import clamp_thread_count
from scenebrowse.videofilter import is_video_extension
from scenebrowse.rename import compose_filename, validate_filename
from scenebrowse.clipboard import parse_directory_entries

clamp_thread_count(100)                              # 32
is_video_extension("clip.MKV")                       # True
validate_filename(compose_filename("holiday", "mp4"))  # 'holiday.mp4'
parse_directory_entries("SIG\n/videos:Videos", "SIG")  # [('/videos', 'Videos')]
```

## What this package does not do

This is a library only. It has no command to run, and it has no window, table view or menus. It does not store a video database or tags, and it does not run ffprobe or ffmpeg to make thumbnails. A caller that wants those supplies them itself, for example the `salient_of` function passed to `filter_files`.

## Tests

```
pip install -e .[test]
pytest
```