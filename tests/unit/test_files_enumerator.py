"""Tests for native and browser file enumeration."""
import os
from pathlib import Path

import pytest

from fdpsync.core.exceptions import InvalidInputError, PathNotFoundError
from fdpsync.core.files import (
    BrowserSource,
    FileSource,
    FileSystemType,
    NativeSource,
    SelectedFile,
    filter_browser_recursive_files,
    filter_dot_files,
    get_browser_file_entries,
    get_native_file_entries,
    get_native_paths,
)


class TestNativeEnumeration:
    """Test suite for native filesystem enumeration."""

    def test_recursive_entries(self, sample_tree):
        entries = get_native_file_entries(sample_tree, recursive=True)

        relative = sorted(entry.relative_path for entry in entries)
        assert relative == [".hidden", "a.txt", "sub/b.txt"]

    def test_relative_path_with_base(self, sample_tree):
        entries = get_native_file_entries(sample_tree, recursive=True)

        for entry in entries:
            assert entry.relative_path_with_base == f"root/{entry.relative_path}"
            assert entry.file_system_type is FileSystemType.NATIVE
            assert Path(entry.full_path).is_file()

    def test_non_recursive_ignores_subdirectories(self, sample_tree):
        entries = get_native_file_entries(sample_tree, recursive=False)

        assert sorted(entry.relative_path for entry in entries) == [".hidden", "a.txt"]

    def test_trailing_separator_keeps_base_name(self, sample_tree):
        entries = get_native_file_entries(f"{sample_tree}/", recursive=False)

        assert all(entry.relative_path_with_base.startswith("root/") for entry in entries)

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            get_native_file_entries(tmp_path / "missing", recursive=True)

    def test_file_root_raises(self, sample_tree):
        with pytest.raises(InvalidInputError):
            get_native_paths(sample_tree / "a.txt")

    def test_symlinked_directory_loop_is_skipped(self, sample_tree):
        os.symlink(sample_tree, sample_tree / "sub" / "loop", target_is_directory=True)

        entries = get_native_file_entries(sample_tree, recursive=True)

        assert sorted(entry.relative_path for entry in entries) == [".hidden", "a.txt", "sub/b.txt"]

    def test_symlinked_file_is_skipped(self, sample_tree, tmp_path):
        outside = tmp_path / "outside.txt"
        outside.write_bytes(b"not in the tree")
        os.symlink(outside, sample_tree / "link.txt")

        paths = get_native_paths(sample_tree, recursive=True)

        assert sample_tree / "link.txt" not in paths
        assert sample_tree / "a.txt" in paths

    def test_empty_directory(self, tmp_path):
        assert get_native_file_entries(tmp_path, recursive=True) == []


class TestBrowserEnumeration:
    """Test suite for browser selection enumeration."""

    def test_entries(self, browser_files):
        entries = get_browser_file_entries(browser_files)

        assert [entry.relative_path for entry in entries] == ["x.txt", "sub/y.txt"]
        assert [entry.relative_path_with_base for entry in entries] == ["base/x.txt", "base/sub/y.txt"]
        assert all(entry.full_path == '' for entry in entries)
        assert all(entry.file_system_type is FileSystemType.BROWSER for entry in entries)

    def test_empty_selection(self):
        assert get_browser_file_entries([]) == []

    def test_missing_attribute_raises(self, browser_files):
        class Plain:
            name = "x.txt"

        with pytest.raises(InvalidInputError, match="webkit_relative_path"):
            get_browser_file_entries([*browser_files, Plain()])

    def test_missing_base_segment_raises(self):
        with pytest.raises(InvalidInputError, match="base path"):
            get_browser_file_entries([SelectedFile("x.txt", b"")])

    def test_empty_base_segment_raises(self):
        with pytest.raises(InvalidInputError):
            get_browser_file_entries([SelectedFile("/x.txt", b"")])

    def test_foreign_base_raises(self):
        files = [SelectedFile("base/x.txt", b""), SelectedFile("other/y.txt", b"")]

        with pytest.raises(InvalidInputError):
            get_browser_file_entries(files)


class TestFilters:
    """Test suite for entry filters."""

    def test_filter_dot_files(self, sample_tree):
        entries = filter_dot_files(get_native_file_entries(sample_tree, recursive=True))

        assert sorted(entry.relative_path for entry in entries) == ["a.txt", "sub/b.txt"]

    def test_filter_dot_files_checks_last_segment_only(self):
        entries = get_browser_file_entries([
            SelectedFile("base/.config/settings.json", b""),
            SelectedFile("base/.env", b""),
        ])

        assert [entry.relative_path for entry in filter_dot_files(entries)] == [".config/settings.json"]

    def test_filter_browser_recursive_files(self, browser_files):
        entries = filter_browser_recursive_files(get_browser_file_entries(browser_files))

        assert [entry.relative_path for entry in entries] == ["x.txt"]


class TestFileSource:
    """Test suite for file source coercion."""

    def test_path_string_is_native(self, sample_tree):
        source = FileSource.of(str(sample_tree))

        assert isinstance(source, NativeSource)
        assert source.file_system_type is FileSystemType.NATIVE

    def test_pathlike_is_native(self, sample_tree):
        assert isinstance(FileSource.of(sample_tree), NativeSource)

    def test_file_list_is_browser(self, browser_files):
        source = FileSource.of(browser_files)

        assert isinstance(source, BrowserSource)
        assert source.file_system_type is FileSystemType.BROWSER

    def test_source_passthrough(self, browser_files):
        source = BrowserSource(tuple(browser_files))

        assert FileSource.of(source) is source

    @pytest.mark.parametrize("value", [42, b"bytes", None])
    def test_unsupported_values(self, value):
        with pytest.raises(InvalidInputError):
            FileSource.of(value)

    def test_browser_non_recursive(self, browser_files):
        entries = BrowserSource(tuple(browser_files)).enumerate(recursive=False)

        assert [entry.relative_path for entry in entries] == ["x.txt"]


class TestFileEntryRead:
    """Test suite for lazy content reads."""

    @pytest.mark.asyncio
    async def test_native_read(self, sample_tree):
        entry = next(e for e in get_native_file_entries(sample_tree, True) if e.relative_path == "a.txt")

        assert await entry.read() == b"file a"

    @pytest.mark.asyncio
    async def test_native_read_vanished_file(self, sample_tree):
        entry = next(e for e in get_native_file_entries(sample_tree, True) if e.relative_path == "a.txt")
        (sample_tree / "a.txt").unlink()

        with pytest.raises(PathNotFoundError):
            await entry.read()

    @pytest.mark.asyncio
    async def test_browser_read(self, browser_files):
        entry = get_browser_file_entries(browser_files)[0]

        assert await entry.read() == b"x content"
