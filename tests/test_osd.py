import pytest

from scenebrowse.osd import (
    CpuPriority,
    IoPriority,
    ThreadPriority,
    TrashError,
    default_ffmpeg,
    default_ffprobe,
    find_trash_dir,
    move_to_trash,
    priority_levels,
    rename_file,
)


def _make_trash(root):
    (root / "info").mkdir(parents=True)
    (root / "files").mkdir(parents=True)
    return root


def test_priority_levels_highest():
    assert priority_levels(ThreadPriority.HIGHEST) == (CpuPriority.HIGH, IoPriority.HIGH)


def test_priority_levels_from_int():
    assert priority_levels(3) == (CpuPriority.NORMAL, IoPriority.NORMAL)


def test_lowest_and_idle_share_levels():
    assert priority_levels(ThreadPriority.LOWEST) == priority_levels(ThreadPriority.IDLE)
    assert priority_levels(ThreadPriority.IDLE) == (CpuPriority.IDLE, IoPriority.IDLE)


@pytest.mark.parametrize("value", [ThreadPriority.TIME_CRITICAL, ThreadPriority.INHERIT, -1, 99])
def test_unsupported_priorities_raise(value):
    with pytest.raises(ValueError):
        priority_levels(value)


def test_find_trash_in_local_share(tmp_path):
    trash = _make_trash(tmp_path / ".local" / "share" / "Trash")
    assert find_trash_dir(tmp_path) == trash


def test_find_trash_prefers_xdg(tmp_path):
    _make_trash(tmp_path / "home" / ".local" / "share" / "Trash")
    xdg = tmp_path / "xdg"
    trash = _make_trash(xdg / "Trash")
    assert find_trash_dir(tmp_path / "home", str(xdg)) == trash


def test_find_trash_falls_back_to_dot_trash(tmp_path):
    trash = _make_trash(tmp_path / ".trash")
    assert find_trash_dir(tmp_path, str(tmp_path / "nowhere")) == trash


def test_find_trash_missing(tmp_path):
    with pytest.raises(TrashError):
        find_trash_dir(tmp_path)


def test_find_trash_without_subdirs(tmp_path):
    (tmp_path / ".trash").mkdir()
    with pytest.raises(TrashError):
        find_trash_dir(tmp_path)


def test_move_to_trash_moves_file(tmp_path):
    trash = _make_trash(tmp_path / "trash")
    video = tmp_path / "movie.mkv"
    video.write_bytes(b"data")
    target = move_to_trash(video, trash)
    assert not video.exists()
    assert target == trash / "files" / "movie.mkv"
    assert target.read_bytes() == b"data"


def test_move_to_trash_avoids_collision(tmp_path):
    trash = _make_trash(tmp_path / "trash")
    (trash / "files" / "clip.tar.gz").write_bytes(b"old")
    video = tmp_path / "clip.tar.gz"
    video.write_bytes(b"new")
    target = move_to_trash(video, trash)
    assert target.name == "clip.2.tar.gz"
    assert (trash / "files" / "clip.tar.gz").read_bytes() == b"old"


def test_move_to_trash_collision_with_info(tmp_path):
    trash = _make_trash(tmp_path / "trash")
    (trash / "info" / "a.mp4.trashinfo").write_text("x")
    video = tmp_path / "a.mp4"
    video.write_bytes(b"v")
    target = move_to_trash(video, trash)
    assert target.parent == trash / "files"
    assert target.name != "a.mp4"
    assert target.exists()


def test_move_missing_file_raises(tmp_path):
    trash = _make_trash(tmp_path / "trash")
    with pytest.raises(TrashError):
        move_to_trash(tmp_path / "absent.mkv", trash)


def test_default_executables():
    assert default_ffprobe() == "ffprobe"
    assert default_ffmpeg() == "ffmpeg"


def test_rename_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_text("hello")
    dst = tmp_path / "b.txt"
    rename_file(src, dst)
    assert dst.read_text() == "hello"
    assert not src.exists()


def test_rename_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        rename_file(tmp_path / "none", tmp_path / "other")