"""Tests for absolute path helpers."""
import pytest

from fdpsync.core.exceptions import InvalidPathError, InvalidInputError, RootOperationError
from fdpsync.core.files import FileEntry, FileSystemType
from fdpsync.core.path import (
    PathInfo,
    assert_directory_name,
    assert_non_root_parts,
    assert_pod_name,
    combine,
    extract_path_info,
    get_base_name,
    get_path_from_parts,
    get_path_parts,
    get_upload_path,
    split_path,
)


class TestCombine:
    """Test suite for combine()."""

    def test_strips_slashes_from_long_parts(self):
        assert combine("/a/", "b", "/c/") == "/a/b/c"

    def test_drops_empty_parts(self):
        assert combine("", "a", "", "b") == "/a/b"

    def test_keeps_leading_root(self):
        assert combine("/", "docs") == "/docs"

    def test_no_parts_is_root(self):
        assert combine() == "/"

    def test_single_character_parts_kept(self):
        assert combine("a", "b") == "/a/b"


class TestGetPathParts:
    """Test suite for get_path_parts()."""

    def test_root(self):
        assert get_path_parts("/") == ["/"]

    def test_nested(self):
        assert get_path_parts("/a/b/c.txt") == ["/", "a", "b", "c.txt"]

    def test_empty_raises(self):
        with pytest.raises(InvalidPathError):
            get_path_parts("")

    def test_relative_raises(self):
        with pytest.raises(InvalidPathError):
            get_path_parts("relative/path")

    @pytest.mark.parametrize("path", ["/", "/a", "/a/b", "/docs/2023/report.pdf"])
    def test_parts_roundtrip(self, path):
        assert get_path_from_parts(get_path_parts(path)) == path


class TestGetPathFromParts:
    """Test suite for get_path_from_parts()."""

    def test_minus_parts(self):
        assert get_path_from_parts(["/", "a", "b", "c"], 1) == "/a/b"

    def test_minus_all_named_parts_gives_root(self):
        assert get_path_from_parts(["/", "a"], 1) == "/"

    def test_empty_raises(self):
        with pytest.raises(InvalidPathError, match="empty"):
            get_path_from_parts([])

    def test_unrooted_raises(self):
        with pytest.raises(InvalidPathError):
            get_path_from_parts(["a", "b"])

    def test_too_many_minus_parts_raises(self):
        with pytest.raises(InvalidPathError):
            get_path_from_parts(["/", "a"], 2)


class TestAssertions:
    """Test suite for path assertions."""

    def test_root_parts_rejected(self):
        with pytest.raises(RootOperationError):
            assert_non_root_parts(["/"])

    def test_named_parts_accepted(self):
        assert_non_root_parts(["/", "a"])

    @pytest.mark.parametrize("name", ["", "a/b", "x" * 101])
    def test_bad_directory_names(self, name):
        with pytest.raises(InvalidPathError):
            assert_directory_name(name)

    def test_good_directory_name(self):
        assert_directory_name("photos")

    def test_pod_name(self):
        assert_pod_name("my-pod")
        with pytest.raises(InvalidInputError):
            assert_pod_name("")
        with pytest.raises(InvalidInputError):
            assert_pod_name("p" * 65)


class TestPathInfo:
    """Test suite for path splitting helpers."""

    def test_extract_path_info(self):
        assert extract_path_info("/docs/a.txt") == PathInfo(path="/docs", filename="a.txt")

    def test_extract_top_level(self):
        assert extract_path_info("/a.txt") == PathInfo(path="/", filename="a.txt")

    def test_extract_root_raises(self):
        with pytest.raises(RootOperationError):
            extract_path_info("/")

    def test_base_name(self):
        assert get_base_name("sub/file.txt") == "file.txt"
        assert get_base_name("sub/") is None

    def test_split_path(self):
        assert split_path("a/b") == ["a", "b"]


def test_get_upload_path():
    entry = FileEntry(
        file_system_type=FileSystemType.BROWSER,
        full_path='',
        relative_path='sub/file.txt',
        relative_path_with_base='base/sub/file.txt',
        source=None,
    )
    assert get_upload_path(entry, True) == "/base/sub/file.txt"
    assert get_upload_path(entry, False) == "/sub/file.txt"
