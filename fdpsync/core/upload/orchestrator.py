"""
Directory upload orchestrator.

Drives a directory upload in strict sequence:

1. check the account may write
2. check the environment supports the file source
3. enumerate and filter files
4. create every planned remote directory, parents first
5. upload every file

Any failure after the checks aborts the remaining steps. Directories that
were already created are left in place.
"""
from typing import Callable, List, Optional

from ..exceptions import (
    DirectoryCreationError,
    EnvironmentMismatchError,
    FdpException,
    PathNotFoundError,
    UploadError,
)
from ..files import FileEntry, FileSource, FileSystemType, SourceLike, filter_dot_files
from ..logging import get_logger
from ..path import assert_pod_name, get_upload_path
from .models import (
    DirectoryCreateStatus,
    DirectoryUploadResult,
    Environment,
    UploadDirectoryOptions,
    UploadProgress,
)
from .planner import DirectoryPlan, compute_plan
from .protocols import AccountProtocol, ContentServiceProtocol, DirectoryServiceProtocol

logger = get_logger('fdpsync.upload')


class UploadOrchestrator:
    """
    Coordinates directory uploads into a pod.

    Uses dependency injection for the remote collaborators and the
    environment capabilities, so either runtime can be simulated in tests.

    Example:
        >>> orchestrator = UploadOrchestrator(client, client, client)
        >>> result = await orchestrator.upload_tree("my-pod", "./photos")
        >>> print(result.uploaded_files)
    """

    def __init__(
        self,
        directory_service: DirectoryServiceProtocol,
        content_service: ContentServiceProtocol,
        account: AccountProtocol,
        environment: Optional[Environment] = None,
        progress_callback: Optional[Callable[[UploadProgress], None]] = None
    ):
        """
        Initialize upload orchestrator.

        Args:
            directory_service: Remote directory API
            content_service: Remote content upload API
            account: Account/session provider
            environment: Runtime capabilities (defaults to native)
            progress_callback: Called after each uploaded file
        """
        self._directories = directory_service
        self._content = content_service
        self._account = account
        self._environment = environment or Environment.native()
        self._progress_callback = progress_callback

    @property
    def environment(self) -> Environment:
        return self._environment

    async def upload_tree(
        self,
        pod_name: str,
        source: SourceLike,
        options: Optional[UploadDirectoryOptions] = None
    ) -> DirectoryUploadResult:
        """
        Upload a directory tree into a pod.

        Args:
            pod_name: Target pod
            source: Local directory path, browser file selection or FileSource
            options: Upload options (defaults apply when omitted)

        Returns:
            What was created and uploaded

        Raises:
            AuthorizationError: If the account may not write
            EnvironmentMismatchError: If the source is unsupported here
            PathNotFoundError: If a local directory or file is missing
            InvalidInputError: If a browser selection is malformed
            DirectoryCreationError: If a remote directory cannot be created
            UploadError: If a file upload fails
        """
        options = options or UploadDirectoryOptions()
        self._account.assert_writable()
        assert_pod_name(pod_name)

        file_source = FileSource.of(source)
        self._check_environment(file_source)

        files = file_source.enumerate(options.is_recursive)
        if options.exclude_dot_files:
            files = filter_dot_files(files)

        result = DirectoryUploadResult()
        if not files:
            logger.info("Nothing to upload")
            return result

        plan = compute_plan(
            entry.relative_path_with_base if options.is_include_directory_name else entry.relative_path
            for entry in files
        )
        logger.info(f"Uploading {len(files)} files into pod {pod_name!r} ({len(plan)} directories)")

        await self._create_directories(pod_name, plan, result)
        await self._upload_files(pod_name, files, options, result)

        logger.info(f"Upload finished: {len(result.uploaded_files)} files, {result.uploaded_bytes} bytes")
        return result

    def _check_environment(self, source: FileSource) -> None:
        if source.file_system_type is FileSystemType.NATIVE and not self._environment.native_fs:
            raise EnvironmentMismatchError(
                "Directory uploading with a local path is not available without filesystem access"
            )
        if source.file_system_type is FileSystemType.BROWSER and not self._environment.browser_files:
            raise EnvironmentMismatchError(
                "Directory uploading with browser files is not available in this environment"
            )

    async def _create_directories(
        self,
        pod_name: str,
        plan: DirectoryPlan,
        result: DirectoryUploadResult
    ) -> None:
        for directory in plan.by_depth():
            logger.debug(f"Creating directory {directory}")
            try:
                outcome = await self._directories.create_directory(pod_name, directory)
            except FdpException as e:
                raise DirectoryCreationError(e.message, path=directory) from e
            except Exception as e:
                raise DirectoryCreationError(str(e), path=directory) from e

            if outcome.status is DirectoryCreateStatus.CREATED:
                result.created_directories.append(directory)
            elif outcome.status is DirectoryCreateStatus.ALREADY_EXISTS:
                logger.debug(f"Directory already exists: {directory}")
                result.existing_directories.append(directory)
            else:
                raise DirectoryCreationError(
                    outcome.reason or f"Could not create directory {directory}",
                    path=directory
                )

    async def _upload_files(
        self,
        pod_name: str,
        files: List[FileEntry],
        options: UploadDirectoryOptions,
        result: DirectoryUploadResult
    ) -> None:
        progress = UploadProgress(total_files=len(files))

        for entry in files:
            upload_path = get_upload_path(entry, options.is_include_directory_name)
            try:
                data = await entry.read()
            except PathNotFoundError:
                raise
            except FdpException as e:
                raise UploadError(e.message, path=upload_path) from e
            except Exception as e:
                raise UploadError(f"Could not read file: {e}", path=upload_path) from e

            logger.debug(f"Uploading {upload_path} ({len(data)} bytes)")
            try:
                await self._content.upload_content(pod_name, upload_path, data, options.upload_options)
            except FdpException as e:
                raise UploadError(e.message, path=upload_path) from e
            except Exception as e:
                raise UploadError(str(e), path=upload_path) from e

            result.uploaded_files.append(upload_path)
            result.uploaded_bytes += len(data)

            progress.uploaded_files += 1
            progress.uploaded_bytes += len(data)
            progress.current_path = upload_path
            if self._progress_callback:
                self._progress_callback(progress)
