"""
File enumeration for directory uploads.

Native trees and browser selections are turned into the same FileEntry list:

    native root "/home/me/photos" with file "2023/a.jpg"
    browser file with webkit_relative_path "photos/2023/a.jpg"

both give relative_path "2023/a.jpg" and relative_path_with_base
"photos/2023/a.jpg".
"""
import os
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import InvalidInputError, PathNotFoundError
from ..logging import get_logger
from .models import BrowserFile, FileEntry, FileSystemType

logger = get_logger('fdpsync.files')


def get_native_paths(root: Union[str, Path], recursive: bool = False) -> List[Path]:
    """
    List file paths under a local directory.

    Subdirectories are descended into only when recursive is set; otherwise
    they are ignored. Symbolic links are skipped. Entries are visited in name
    order.

    Raises:
        PathNotFoundError: If root does not exist
        InvalidInputError: If root is not a directory
    """
    root = Path(root)
    if not root.exists():
        raise PathNotFoundError(f'Directory does not exist: "{root}"', path=str(root))
    if not root.is_dir():
        raise InvalidInputError(f'Path is not a directory: "{root}"')

    file_paths: List[Path] = []
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        if entry.is_symlink():
            logger.debug(f"Skipping symbolic link {entry.path}")
            continue

        entry_path = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            if recursive:
                file_paths.extend(get_native_paths(entry_path, True))
        elif entry.is_file(follow_symlinks=False):
            file_paths.append(entry_path)

    return file_paths


def get_native_file_entries(root: Union[str, Path], recursive: bool) -> List[FileEntry]:
    """
    Build file entries for a local directory.

    Args:
        root: Local directory to upload
        recursive: Include files from subdirectories

    Returns:
        Entries with POSIX-style relative paths
    """
    root = Path(os.path.abspath(root))
    base_name = root.name
    paths = get_native_paths(root, recursive)

    entries = []
    for full_path in paths:
        relative_path = full_path.relative_to(root).as_posix()
        entries.append(FileEntry(
            file_system_type=FileSystemType.NATIVE,
            full_path=str(full_path),
            relative_path=relative_path,
            relative_path_with_base=f"{base_name}/{relative_path}",
            source=str(full_path),
        ))

    logger.debug(f"Found {len(entries)} files under {root} (recursive={recursive})")
    return entries


def _get_relative_path(item: object) -> str:
    path = getattr(item, 'webkit_relative_path', None)
    if not isinstance(path, str):
        raise InvalidInputError(f'{item!r} does not contain "webkit_relative_path"')
    return path


def get_browser_file_entries(files: Iterable[BrowserFile]) -> List[FileEntry]:
    """
    Build file entries for a browser file selection.

    The first path segment of the first file is the selected folder's name;
    every file must live under it.

    Raises:
        InvalidInputError: If a file has no usable relative path
    """
    files = list(files)
    if not files:
        return []

    first_path = _get_relative_path(files[0])
    parts = first_path.split('/')
    if len(parts) < 2 or not parts[0]:
        raise InvalidInputError(
            f'"webkit_relative_path" does not contain base path part: "{first_path}"'
        )
    prefix = parts[0] + '/'

    entries = []
    for item in files:
        path_with_base = _get_relative_path(item)
        relative_path = path_with_base[len(prefix):]
        if not path_with_base.startswith(prefix) or not relative_path:
            raise InvalidInputError(
                f'"webkit_relative_path" is not under "{parts[0]}": "{path_with_base}"'
            )
        entries.append(FileEntry(
            file_system_type=FileSystemType.BROWSER,
            full_path='',
            relative_path=relative_path,
            relative_path_with_base=path_with_base,
            source=item,
        ))

    logger.debug(f"Found {len(entries)} files in browser selection {parts[0]!r}")
    return entries


def filter_dot_files(entries: List[FileEntry]) -> List[FileEntry]:
    """Drop entries whose file name starts with a dot."""
    return [entry for entry in entries if not entry.name.startswith('.')]


def filter_browser_recursive_files(entries: List[FileEntry]) -> List[FileEntry]:
    """Keep only files directly under the selected folder."""
    return [entry for entry in entries if '/' not in entry.relative_path]
