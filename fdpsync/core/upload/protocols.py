"""
Protocol definitions for upload module.

Defines the interfaces of the remote collaborators the orchestrator depends
on, so they can be injected and replaced with fakes in tests.
"""
from typing import Protocol

from ..api.models import DirectoryItem
from .models import DirectoryCreateOutcome, UploadOptions


class DirectoryServiceProtocol(Protocol):
    """
    Protocol for the remote directory API of a pod.

    Credentials (owner key, pod password) are the implementation's concern.
    """

    async def create_directory(self, pod_name: str, path: str) -> DirectoryCreateOutcome:
        """
        Create a directory.

        Args:
            pod_name: Pod to create the directory in
            path: Absolute directory path

        Returns:
            Structured outcome; an existing directory is not an error
        """
        ...

    async def remove_directory(self, pod_name: str, path: str) -> None:
        """Remove a directory."""
        ...

    async def list_directory(
        self,
        pod_name: str,
        path: str,
        recursive: bool = False
    ) -> DirectoryItem:
        """List a directory, optionally with all descendants."""
        ...


class ContentServiceProtocol(Protocol):
    """Protocol for uploading file content into a pod."""

    async def upload_content(
        self,
        pod_name: str,
        path: str,
        data: bytes,
        options: UploadOptions
    ) -> None:
        """
        Upload file content.

        Args:
            pod_name: Target pod
            path: Absolute remote file path
            data: File content
            options: Pass-through upload options
        """
        ...


class AccountProtocol(Protocol):
    """Protocol for the account/session provider."""

    def assert_writable(self) -> None:
        """
        Check the account may write.

        Raises:
            AuthorizationError: If write access is missing
        """
        ...
