"""Core building blocks: paths, file enumeration, upload, crypto and API."""
from .exceptions import (
    FdpException,
    InvalidPathError,
    RootOperationError,
    PathNotFoundError,
    EnvironmentMismatchError,
    InvalidInputError,
    AuthorizationError,
    DecryptionError,
    RemoteOperationError,
    DirectoryCreationError,
    UploadError,
    RemoteAPIError,
)

__all__ = [
    'FdpException',
    'InvalidPathError',
    'RootOperationError',
    'PathNotFoundError',
    'EnvironmentMismatchError',
    'InvalidInputError',
    'AuthorizationError',
    'DecryptionError',
    'RemoteOperationError',
    'DirectoryCreationError',
    'UploadError',
    'RemoteAPIError',
]
