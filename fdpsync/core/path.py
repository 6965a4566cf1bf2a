"""
Absolute pod path handling.

Paths sent to the remote directory API are absolute, slash separated strings
("/", "/docs", "/docs/report.txt"). Every caller builds and splits them
through the helpers below so malformed input is rejected at the boundary.

Example:
    >>> combine("/a/", "b", "/c/")
    '/a/b/c'
    >>> get_path_parts("/a/b")
    ['/', 'a', 'b']
    >>> get_path_from_parts(['/', 'a', 'b'], 1)
    '/a'
"""
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from .exceptions import InvalidPathError, RootOperationError, InvalidInputError

if TYPE_CHECKING:
    from .files.models import FileEntry

ROOT = '/'
MAX_DIRECTORY_NAME_LENGTH = 100
MAX_POD_NAME_LENGTH = 64


@dataclass(frozen=True)
class PathInfo:
    """Parent directory and entry name of an absolute path."""
    path: str
    filename: str


def split_path(path: str) -> List[str]:
    """Splits a path on '/' without any validation."""
    return path.split('/')


def combine(*parts: str) -> str:
    """
    Combine parts into an absolute path.

    Empty parts are dropped and slashes are stripped from every part longer
    than one character, so fragments like "/a/" can be passed directly.

    Args:
        *parts: Path fragments

    Returns:
        Absolute path
    """
    items = [part for part in parts if part != '']
    items = [part.replace('/', '') if len(part) > 1 else part for part in items]

    if not items or items[0] != ROOT:
        items.insert(0, ROOT)

    return get_path_from_parts(items)


def get_path_parts(path: str) -> List[str]:
    """
    Split an absolute path into parts prefixed with the root sentinel.

    Args:
        path: Absolute path

    Returns:
        Parts list, e.g. ['/', 'a', 'b'] for '/a/b' and ['/'] for '/'

    Raises:
        InvalidPathError: If path is empty or not absolute
    """
    if len(path) == 0:
        raise InvalidPathError("Path is empty")

    if not path.startswith(ROOT):
        raise InvalidPathError(f"Incorrect path: {path!r} is not absolute")

    if path == ROOT:
        return [ROOT]

    return [ROOT, *path.split('/')[1:]]


def get_path_from_parts(parts: List[str], minus_parts: int = 0) -> str:
    """
    Join parts into a path, dropping a number of trailing parts.

    Args:
        parts: Parts list starting with the root sentinel
        minus_parts: How many trailing parts should be removed

    Returns:
        Absolute path

    Raises:
        InvalidPathError: If parts are empty, unrooted or too short
    """
    if len(parts) == 0:
        raise InvalidPathError("Parts list is empty")

    if parts[0] != ROOT:
        raise InvalidPathError('Path parts must start with "/"')

    if len(parts) <= minus_parts:
        raise InvalidPathError("Incorrect parts count")

    return ROOT + '/'.join(parts[1:len(parts) - minus_parts])


def assert_non_root_parts(parts: List[str]) -> None:
    """
    Assert that parts point to a named entry, not the root.

    Raises:
        RootOperationError: If parts denote the root
    """
    if len(parts) < 2:
        raise RootOperationError("Can not create or remove the root directory")


def get_base_name(path: str) -> Optional[str]:
    """Last segment of a path, or None when there is none."""
    name = path.split('/')[-1]
    return name or None


def extract_path_info(path: str) -> PathInfo:
    """
    Split an absolute path into its parent directory and entry name.

    Raises:
        InvalidPathError: If path is malformed
        RootOperationError: If path is the root
    """
    parts = get_path_parts(path)
    assert_non_root_parts(parts)
    return PathInfo(path=get_path_from_parts(parts, 1), filename=parts[-1])


def assert_directory_name(name: str) -> None:
    """
    Assert that a directory name can be created remotely.

    Raises:
        InvalidPathError: If the name is empty, contains '/' or is too long
    """
    if not isinstance(name, str):
        raise InvalidPathError("Name must be a string")

    if len(name) == 0:
        raise InvalidPathError("Name is empty")

    if '/' in name:
        raise InvalidPathError('Name contains "/" symbol')

    if len(name) > MAX_DIRECTORY_NAME_LENGTH:
        raise InvalidPathError("Directory name is too long")


def assert_pod_name(name: str) -> None:
    """
    Assert that a pod name is usable.

    Raises:
        InvalidInputError: If the name is empty or too long
    """
    if not isinstance(name, str) or len(name) == 0:
        raise InvalidInputError("Pod name is empty")

    if len(name) > MAX_POD_NAME_LENGTH:
        raise InvalidInputError("Pod name is too long")


def get_upload_path(entry: 'FileEntry', include_directory_name: bool) -> str:
    """Remote absolute path a file entry is uploaded to."""
    relative = entry.relative_path_with_base if include_directory_name else entry.relative_path
    return ROOT + relative
