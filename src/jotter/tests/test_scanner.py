import pytest

import jotter.tests.utils as testutils
from jotter.classes.errors import ErrorKind, NotFound, ScanError
from jotter.functions.scanner import Direction, find_adjacent, list_text_files


def test_lists_only_text_files_sorted(tmp_path):
    testutils.setup_test_dir(tmp_path / "folder.txt")
    testutils.setup_test_files(
        tmp_path / "c.txt",
        tmp_path / "a.txt",
        tmp_path / "b.txt",
        tmp_path / "notes.md",
        tmp_path / "README",
    )
    assert list_text_files(tmp_path) == [
        tmp_path / "a.txt",
        tmp_path / "b.txt",
        tmp_path / "c.txt",
    ]


def test_listing_is_stable(tmp_path):
    testutils.setup_test_files(*(tmp_path / f"{name}.txt" for name in "qwertyuiop"))
    assert list_text_files(tmp_path) == list_text_files(tmp_path)


def test_other_extension(tmp_path):
    testutils.setup_test_files(tmp_path / "a.txt", tmp_path / "b.md")
    assert list_text_files(tmp_path, ".md") == [tmp_path / "b.md"]


def test_empty_directory(tmp_path):
    assert list_text_files(tmp_path) == []


def test_missing_directory_raises_scan_error(tmp_path):
    with pytest.raises(ScanError) as info:
        list_text_files(tmp_path / "missing")
    assert info.value.kind is ErrorKind.NOT_FOUND


def test_file_instead_of_directory_raises_scan_error(tmp_path):
    testutils.setup_test_files(tmp_path / "a.txt")
    with pytest.raises(ScanError):
        list_text_files(tmp_path / "a.txt")


@pytest.fixture
def abc(tmp_path):
    return [tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "c.txt"]


@pytest.mark.parametrize("direction", list(Direction))
def test_no_current_file_lands_on_first(abc, direction):
    assert find_adjacent(abc, None, direction) == abc[0]


@pytest.mark.parametrize("direction", list(Direction))
def test_unknown_current_file_lands_on_first(abc, tmp_path, direction):
    assert find_adjacent(abc, tmp_path / "gone.txt", direction) == abc[0]


def test_next_and_previous_in_the_middle(abc):
    assert find_adjacent(abc, abc[1], Direction.NEXT) == abc[2]
    assert find_adjacent(abc, abc[1], Direction.PREVIOUS) == abc[0]


def test_wraps_around_both_ends(abc):
    assert find_adjacent(abc, abc[2], Direction.NEXT) == abc[0]
    assert find_adjacent(abc, abc[0], Direction.PREVIOUS) == abc[2]


@pytest.mark.parametrize("direction", list(Direction))
def test_empty_listing_is_not_found(direction):
    with pytest.raises(NotFound):
        find_adjacent([], None, direction)


@pytest.mark.parametrize("direction", list(Direction))
def test_sole_file_has_no_neighbour(tmp_path, direction):
    with pytest.raises(NotFound):
        find_adjacent([tmp_path / "a.txt"], tmp_path / "a.txt", direction)


@pytest.mark.parametrize("direction", list(Direction))
def test_sole_file_is_found_from_elsewhere(tmp_path, direction):
    listing = [tmp_path / "a.txt"]
    assert find_adjacent(listing, None, direction) == listing[0]


@pytest.mark.parametrize("length", [2, 3, 4, 7])
def test_previous_and_next_are_inverse(tmp_path, length):
    listing = [tmp_path / f"{index:02}.txt" for index in range(length)]
    for current in listing:
        forward = find_adjacent(listing, current, Direction.NEXT)
        assert find_adjacent(listing, forward, Direction.PREVIOUS) == current
        backward = find_adjacent(listing, current, Direction.PREVIOUS)
        assert find_adjacent(listing, backward, Direction.NEXT) == current
