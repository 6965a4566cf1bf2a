"""
Data models for directory uploads.

Uses dataclasses for options, outcomes and results.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_BLOCK_SIZE = 1_000_000
ALREADY_EXISTS_MESSAGE = 'already listed in the parent directory list'


@dataclass(frozen=True)
class Environment:
    """
    Capabilities of the running environment.

    Attributes:
        native_fs: Local directories can be enumerated and read
        browser_files: Browser file selections can be uploaded
    """
    native_fs: bool = True
    browser_files: bool = True

    @classmethod
    def native(cls) -> 'Environment':
        """Regular interpreter with filesystem access."""
        return cls(native_fs=True, browser_files=True)

    @classmethod
    def browser(cls) -> 'Environment':
        """Sandboxed runtime without filesystem access (e.g. Pyodide)."""
        return cls(native_fs=False, browser_files=True)


@dataclass
class UploadOptions:
    """
    Options passed through to the content upload call.

    Attributes:
        block_size: Block size in bytes the remote splits content into
        content_type: MIME type; detected from the file name when empty
        compression: Compression name understood by the remote, or empty
    """
    block_size: int = DEFAULT_BLOCK_SIZE
    content_type: str = ''
    compression: str = ''


@dataclass
class UploadDirectoryOptions:
    """
    Options for directory uploads.

    Attributes:
        is_recursive: Upload files from subdirectories too
        exclude_dot_files: Skip files whose name starts with a dot
        is_include_directory_name: Keep the uploaded folder's own name as
            the first remote path segment
        upload_options: Options for every file upload
    """
    is_recursive: bool = True
    exclude_dot_files: bool = False
    is_include_directory_name: bool = True
    upload_options: UploadOptions = field(default_factory=UploadOptions)


class DirectoryCreateStatus(Enum):
    """Result kind of a remote directory creation."""
    CREATED = 'created'
    ALREADY_EXISTS = 'already_exists'
    FAILED = 'failed'


@dataclass(frozen=True)
class DirectoryCreateOutcome:
    """
    Structured result of a remote directory creation.

    Example:
        >>> DirectoryCreateOutcome.failed("no space").is_success
        False
    """
    status: DirectoryCreateStatus
    reason: str = ''

    @property
    def is_success(self) -> bool:
        return self.status is not DirectoryCreateStatus.FAILED

    @classmethod
    def created(cls) -> 'DirectoryCreateOutcome':
        return cls(DirectoryCreateStatus.CREATED)

    @classmethod
    def already_exists(cls, reason: str = '') -> 'DirectoryCreateOutcome':
        return cls(DirectoryCreateStatus.ALREADY_EXISTS, reason)

    @classmethod
    def failed(cls, reason: str) -> 'DirectoryCreateOutcome':
        return cls(DirectoryCreateStatus.FAILED, reason)


def is_already_exists_message(message: Optional[str]) -> bool:
    """Check if a remote error message means the directory already exists."""
    return bool(message) and ALREADY_EXISTS_MESSAGE in message


@dataclass
class UploadProgress:
    """
    Progress of a directory upload.

    Attributes:
        total_files: Number of files to upload
        uploaded_files: Files uploaded so far
        uploaded_bytes: Bytes uploaded so far
        current_path: Remote path of the last uploaded file
    """
    total_files: int = 0
    uploaded_files: int = 0
    uploaded_bytes: int = 0
    current_path: Optional[str] = None

    @property
    def percentage(self) -> float:
        if self.total_files == 0:
            return 100.0
        return (self.uploaded_files / self.total_files) * 100


@dataclass
class DirectoryUploadResult:
    """
    Result of a directory upload.

    Attributes:
        created_directories: Remote directories created by this upload
        existing_directories: Planned directories that already existed
        uploaded_files: Remote paths of uploaded files, in upload order
        uploaded_bytes: Total bytes uploaded
    """
    created_directories: List[str] = field(default_factory=list)
    existing_directories: List[str] = field(default_factory=list)
    uploaded_files: List[str] = field(default_factory=list)
    uploaded_bytes: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.uploaded_files and not self.created_directories
