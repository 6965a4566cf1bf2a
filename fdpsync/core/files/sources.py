"""
File sources for directory uploads.

A source is either a local directory (NativeSource) or a browser file
selection (BrowserSource). Both enumerate to the same FileEntry list.
"""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple, Union

from ..exceptions import InvalidInputError
from .enumerator import (
    get_native_file_entries,
    get_browser_file_entries,
    filter_browser_recursive_files,
)
from .models import BrowserFile, FileEntry, FileSystemType


class FileSource(ABC):
    """Base class for upload sources."""

    file_system_type: FileSystemType

    @abstractmethod
    def enumerate(self, recursive: bool = True) -> List[FileEntry]:
        """List the files to upload."""
        pass

    @staticmethod
    def of(value: Any) -> 'FileSource':
        """
        Coerce a caller-supplied value into a source.

        A str or os.PathLike becomes a NativeSource, an iterable of browser
        files becomes a BrowserSource, and sources are returned unchanged.

        Raises:
            InvalidInputError: If the value is none of the above
        """
        if isinstance(value, FileSource):
            return value
        if isinstance(value, (str, os.PathLike)):
            return NativeSource(Path(value))
        if isinstance(value, (bytes, dict)):
            raise InvalidInputError(f"Unsupported file source: {type(value).__name__}")
        try:
            files = tuple(value)
        except TypeError:
            raise InvalidInputError(f"Unsupported file source: {type(value).__name__}") from None
        return BrowserSource(files)


@dataclass(frozen=True)
class NativeSource(FileSource):
    """Local directory to upload."""
    path: Path
    file_system_type = FileSystemType.NATIVE

    def enumerate(self, recursive: bool = True) -> List[FileEntry]:
        return get_native_file_entries(self.path, recursive)


@dataclass(frozen=True)
class BrowserSource(FileSource):
    """Browser file selection to upload."""
    files: Tuple[BrowserFile, ...]
    file_system_type = FileSystemType.BROWSER

    def enumerate(self, recursive: bool = True) -> List[FileEntry]:
        # Selections are always recursive, non-recursive mode is a post filter
        entries = get_browser_file_entries(self.files)
        if not recursive:
            entries = filter_browser_recursive_files(entries)
        return entries


SourceLike = Union[FileSource, str, os.PathLike, List[BrowserFile], Tuple[BrowserFile, ...]]
