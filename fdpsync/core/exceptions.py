"""
Custom exceptions for pod directory operations.

This module defines exception classes raised by path handling, file
enumeration, directory upload and the password cipher.
"""
from typing import Optional


class FdpException(Exception):
    """Base exception for all fdpsync errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class InvalidPathError(FdpException):
    """Exception raised for a malformed path string."""
    pass


class RootOperationError(FdpException):
    """Exception raised when an operation needs a named entry but got the root."""
    pass


class PathNotFoundError(FdpException):
    """Exception raised when a local file or directory does not exist."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class EnvironmentMismatchError(FdpException):
    """Exception raised when a file source is not supported by the environment."""
    pass


class InvalidInputError(FdpException):
    """Exception raised for malformed caller input (browser files, pod names)."""
    pass


class AuthorizationError(FdpException):
    """Exception raised when the account has no write capability."""
    pass


class DecryptionError(FdpException):
    """Exception raised when a cipher envelope cannot be decrypted."""
    pass


class RemoteOperationError(FdpException):
    """Base exception for failed calls to the remote collaborators."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message (usually the underlying failure's message)
            path: Remote path the failed call referred to
            error_code: Numeric error code (if available)
        """
        self.path = path
        super().__init__(message, error_code)


class DirectoryCreationError(RemoteOperationError):
    """Exception raised when a remote directory could not be created."""
    pass


class UploadError(RemoteOperationError):
    """Exception raised when a file upload fails."""
    pass


class RemoteAPIError(FdpException):
    """Exception raised for non-successful gateway responses."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message, error_code=status)
