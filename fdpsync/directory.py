"""
Directory - pod-scoped directory operations.

Example:
    >>> async with FairOSClient(config, cookie=cookie) as client:
    ...     directory = Directory.from_client(client)
    ...     await directory.create("my-pod", "/docs")
    ...     await directory.upload("my-pod", "./photos")
"""
from typing import Callable, Optional

from .core.api import DirectoryItem
from .core.exceptions import DirectoryCreationError
from .core.files import SourceLike
from .core.logging import get_logger
from .core.path import (
    assert_directory_name,
    assert_non_root_parts,
    assert_pod_name,
    extract_path_info,
    get_path_parts,
)
from .core.upload import (
    AccountProtocol,
    ContentServiceProtocol,
    DirectoryCreateStatus,
    DirectoryServiceProtocol,
    DirectoryUploadResult,
    Environment,
    UploadDirectoryOptions,
    UploadOrchestrator,
    UploadProgress,
)

logger = get_logger('fdpsync.directory')


class Directory:
    """Directory related operations of a pod."""

    def __init__(
        self,
        directory_service: DirectoryServiceProtocol,
        content_service: ContentServiceProtocol,
        account: AccountProtocol,
        environment: Optional[Environment] = None
    ):
        """
        Initialize directory operations.

        Args:
            directory_service: Remote directory API
            content_service: Remote content upload API
            account: Account/session provider
            environment: Runtime capabilities (defaults to native)
        """
        self._directories = directory_service
        self._content = content_service
        self._account = account
        self._environment = environment or Environment.native()

    @classmethod
    def from_client(cls, client, environment: Optional[Environment] = None) -> 'Directory':
        """Use one client (e.g. FairOSClient) for every collaborator."""
        return cls(client, client, client, environment)

    async def read(self, pod_name: str, path: str, is_recursive: bool = False) -> DirectoryItem:
        """
        Get files and directories under the given path.

        Args:
            pod_name: Pod to read
            path: Path to start listing from
            is_recursive: List all descendants too
        """
        assert_pod_name(pod_name)
        get_path_parts(path)
        return await self._directories.list_directory(pod_name, path, is_recursive)

    async def create(self, pod_name: str, full_path: str) -> None:
        """
        Create a directory.

        Raises:
            InvalidPathError: If the path or directory name is malformed
            RootOperationError: If full_path is the root
            DirectoryCreationError: If the directory exists or creation fails
        """
        self._account.assert_writable()
        assert_pod_name(pod_name)
        parts = get_path_parts(full_path)
        assert_non_root_parts(parts)
        assert_directory_name(parts[-1])

        outcome = await self._directories.create_directory(pod_name, full_path)
        if outcome.status is DirectoryCreateStatus.ALREADY_EXISTS:
            raise DirectoryCreationError(f"Directory already exists: {full_path}", path=full_path)
        if outcome.status is DirectoryCreateStatus.FAILED:
            raise DirectoryCreationError(outcome.reason, path=full_path)

        logger.info(f"Created directory {full_path} in pod {pod_name!r}")

    async def delete(self, pod_name: str, full_path: str) -> None:
        """
        Delete a directory.

        Raises:
            RootOperationError: If full_path is the root
        """
        self._account.assert_writable()
        assert_pod_name(pod_name)
        extract_path_info(full_path)

        await self._directories.remove_directory(pod_name, full_path)
        logger.info(f"Deleted directory {full_path} from pod {pod_name!r}")

    async def upload(
        self,
        pod_name: str,
        source: SourceLike,
        options: Optional[UploadDirectoryOptions] = None,
        progress_callback: Optional[Callable[[UploadProgress], None]] = None
    ) -> DirectoryUploadResult:
        """
        Upload a directory with files.

        Args:
            pod_name: Pod to upload into
            source: Local directory path or browser file selection
            options: Upload options
            progress_callback: Called after each uploaded file
        """
        orchestrator = UploadOrchestrator(
            self._directories,
            self._content,
            self._account,
            environment=self._environment,
            progress_callback=progress_callback,
        )
        return await orchestrator.upload_tree(pod_name, source, options)
