"""File enumeration module."""
from .models import FileSystemType, FileEntry, BrowserFile, SelectedFile
from .readers import NativeFileReader
from .enumerator import (
    get_native_paths,
    get_native_file_entries,
    get_browser_file_entries,
    filter_dot_files,
    filter_browser_recursive_files,
)
from .sources import FileSource, NativeSource, BrowserSource, SourceLike

__all__ = [
    'FileSystemType',
    'FileEntry',
    'BrowserFile',
    'SelectedFile',
    'NativeFileReader',
    'get_native_paths',
    'get_native_file_entries',
    'get_browser_file_entries',
    'filter_dot_files',
    'filter_browser_recursive_files',
    'FileSource',
    'NativeSource',
    'BrowserSource',
    'SourceLike',
]
