"""
fdpsync - Async directory upload for FairOS-dfs pods.

Usage:
    >>> from fdpsync import Directory, FairOSClient, APIConfig
    >>>
    >>> async with FairOSClient(APIConfig(), cookie=cookie) as client:
    ...     directory = Directory.from_client(client)
    ...     result = await directory.upload("my-pod", "./photos")
    ...     print(result.uploaded_files)
"""
from .directory import Directory

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    FairOSClient,
    DirectoryItem,
    FileItem,
)

# Files and upload
from .core.files import FileEntry, FileSystemType, SelectedFile, NativeSource, BrowserSource
from .core.upload import (
    Environment,
    UploadOptions,
    UploadDirectoryOptions,
    UploadOrchestrator,
    UploadProgress,
    DirectoryUploadResult,
    compute_plan,
)
from .core.crypto import PasswordCipher, encrypt, decrypt, derive_key, keccak256_hash
from .core.exceptions import (
    FdpException,
    InvalidPathError,
    RootOperationError,
    PathNotFoundError,
    EnvironmentMismatchError,
    InvalidInputError,
    AuthorizationError,
    DecryptionError,
    DirectoryCreationError,
    UploadError,
    RemoteAPIError,
)
from .core.logging import setup_logging

__version__ = '1.0.0'


__all__ = [
    'Directory',
    'FairOSClient',
    'DirectoryItem',
    'FileItem',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'FileEntry',
    'FileSystemType',
    'SelectedFile',
    'NativeSource',
    'BrowserSource',
    'Environment',
    'UploadOptions',
    'UploadDirectoryOptions',
    'UploadOrchestrator',
    'UploadProgress',
    'DirectoryUploadResult',
    'compute_plan',
    'PasswordCipher',
    'encrypt',
    'decrypt',
    'derive_key',
    'keccak256_hash',
    'FdpException',
    'InvalidPathError',
    'RootOperationError',
    'PathNotFoundError',
    'EnvironmentMismatchError',
    'InvalidInputError',
    'AuthorizationError',
    'DecryptionError',
    'DirectoryCreationError',
    'UploadError',
    'RemoteAPIError',
    'setup_logging',
]
