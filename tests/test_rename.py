import pytest

from scenebrowse.rename import InvalidFilenameError, compose_filename, validate_filename


def test_compose_joins_with_dot():
    assert compose_filename("movie", "mp4") == "movie.mp4"


def test_compose_both_empty():
    assert compose_filename("", "") == ""


def test_compose_one_part_empty():
    assert compose_filename("movie", "") == "movie."
    assert compose_filename("", "mp4") == ".mp4"


def test_validate_returns_name():
    assert validate_filename("movie.mp4") == "movie.mp4"


def test_validate_roundtrip_with_compose():
    name = compose_filename("my clip", "mkv")
    assert validate_filename(name) == name


def test_validate_empty():
    with pytest.raises(InvalidFilenameError, match="Name is empty."):
        validate_filename(compose_filename("", ""))


@pytest.mark.parametrize("name", ["a/b.mp4", "a\\b.mp4"])
def test_validate_separators(name):
    with pytest.raises(InvalidFilenameError, match="cound not have"):
        validate_filename(name)


@pytest.mark.parametrize("name", ["a?b.mp4", "a*b.mp4", "a:b.mp4", "a\nb.mp4"])
def test_validate_illegal_characters(name):
    with pytest.raises(InvalidFilenameError, match="illegal"):
        validate_filename(name)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        validate_filename("")