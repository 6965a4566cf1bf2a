"""
Data models for file enumeration.

A FileEntry describes one file to upload independently of where it came
from: a native filesystem walk or a browser file selection.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union, runtime_checkable

from .readers import NativeFileReader


class FileSystemType(Enum):
    """Origin of a file entry."""
    NATIVE = 'native'
    BROWSER = 'browser'


@runtime_checkable
class BrowserFile(Protocol):
    """
    Protocol for a file handle coming from a browser file selection.

    The selection API reports every file with a relative path that starts
    with the selected folder's name, e.g. "photos/2023/a.jpg".
    """

    webkit_relative_path: str

    async def read(self) -> bytes:
        """Read the whole file content."""
        ...


@dataclass
class SelectedFile:
    """
    In-memory browser file handle.

    Example:
        >>> f = SelectedFile("photos/a.jpg", b"...")
        >>> f.name
        'a.jpg'
    """
    webkit_relative_path: str
    data: bytes = b''

    @property
    def name(self) -> str:
        return self.webkit_relative_path.rsplit('/', 1)[-1]

    @property
    def size(self) -> int:
        return len(self.data)

    async def read(self) -> bytes:
        return self.data


@dataclass
class FileEntry:
    """
    Uniform description of one file to upload.

    Attributes:
        file_system_type: Where the file comes from
        full_path: Absolute local path (empty for browser files)
        relative_path: Path relative to the upload root, e.g. "sub/file.txt"
        relative_path_with_base: Same path prefixed with the root's name,
            e.g. "myfolder/sub/file.txt"
        source: Local path string or browser file handle, read lazily
    """
    file_system_type: FileSystemType
    full_path: str
    relative_path: str
    relative_path_with_base: str
    source: Union[str, BrowserFile] = field(repr=False)

    @property
    def is_native(self) -> bool:
        return self.file_system_type is FileSystemType.NATIVE

    @property
    def name(self) -> str:
        """Final segment of the relative path."""
        return self.relative_path.rsplit('/', 1)[-1]

    async def read(self) -> bytes:
        """
        Read the file content.

        Content is not cached; each call reads from the source again.

        Raises:
            PathNotFoundError: If a native file vanished since enumeration
        """
        if self.is_native:
            return await NativeFileReader().read_file(self.full_path)
        return bytes(await self.source.read())
