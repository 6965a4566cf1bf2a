"""
Async FairOS-dfs gateway client.

Implements the remote directory, content and account collaborators used by
the upload orchestrator on top of the gateway's v1 HTTP API. Logging in is
not handled here: the client is given the session cookie of an existing
login.
"""
import json
import logging
import mimetypes
from typing import Any, Dict, Optional
import aiohttp

from ..exceptions import AuthorizationError, RemoteAPIError
from ..logging import get_logger
from ..path import extract_path_info, get_path_parts
from ..upload.models import (
    DirectoryCreateOutcome,
    UploadOptions,
    is_already_exists_message,
)
from .config import APIConfig
from .models import DirectoryItem, FileItem


class FairOSClient:
    """
    Asynchronous FairOS-dfs gateway client.

    Example:
        >>> config = APIConfig(gateway="http://localhost:9090/")
        >>> async with FairOSClient(config, cookie="fairOS-dfs=...") as client:
        ...     await client.create_directory("my-pod", "/docs")
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        cookie: Optional[str] = None,
        writable: bool = True
    ):
        """
        Initialize gateway client.

        Args:
            config: API configuration (uses defaults if not provided)
            cookie: Session cookie of a logged-in user
            writable: Whether the session may modify pods
        """
        self._config = config or APIConfig.default()
        self._cookie = cookie
        self._writable = writable
        self._session: Optional[aiohttp.ClientSession] = None

        self._logger = get_logger('fdpsync.api')
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'FairOSClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            kwargs = self._config.get_session_kwargs()
            if self._cookie:
                kwargs['headers']['Cookie'] = self._cookie
            self._session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(**self._config.get_connector_kwargs()),
                **kwargs
            )
        return self._session

    async def close(self):
        """Close client and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def assert_writable(self) -> None:
        """
        Check the session may write.

        Raises:
            AuthorizationError: Without a session cookie or in read-only mode
        """
        if not self._cookie:
            raise AuthorizationError("Account is not logged in: session cookie is missing")
        if not self._writable:
            raise AuthorizationError("Account is read-only")

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Send a request to a v1 gateway method.

        Returns:
            Decoded JSON body (empty dict for empty bodies)

        Raises:
            RemoteAPIError: On transport errors and non-2xx responses
        """
        session = await self._ensure_session()
        url = self._config.v1_url(endpoint)

        self._logger.debug(f"{method} {url}")
        try:
            async with session.request(method, url, **self._config.get_request_kwargs(), **kwargs) as response:
                text = await response.text()
                status = response.status
        except aiohttp.ClientError as e:
            raise RemoteAPIError(f"Request to {endpoint} failed: {e}") from e

        body = self._parse_body(text)
        if status >= 400:
            message = body.get('message') or text or f"HTTP {status}"
            self._logger.debug(f"{endpoint} failed with HTTP {status}: {message}")
            raise RemoteAPIError(message, status=status)

        return body

    @staticmethod
    def _parse_body(text: str) -> Dict[str, Any]:
        if not text:
            return {}
        try:
            body = json.loads(text)
        except ValueError:
            return {'message': text.strip()}
        return body if isinstance(body, dict) else {'data': body}

    async def create_directory(self, pod_name: str, path: str) -> DirectoryCreateOutcome:
        """
        Create a directory in a pod.

        Returns:
            CREATED, ALREADY_EXISTS when the gateway reports the name as
            already listed in the parent, FAILED with the gateway message
            otherwise

        Raises:
            RemoteAPIError: On transport errors
        """
        try:
            await self._request('POST', 'dir/mkdir', json={'pod_name': pod_name, 'dir_path': path})
        except RemoteAPIError as e:
            if e.status is None:
                raise
            if is_already_exists_message(e.message):
                return DirectoryCreateOutcome.already_exists(e.message)
            return DirectoryCreateOutcome.failed(e.message)
        return DirectoryCreateOutcome.created()

    async def remove_directory(self, pod_name: str, path: str) -> None:
        """Remove a directory from a pod."""
        await self._request('DELETE', 'dir/rmdir', json={'pod_name': pod_name, 'dir_path': path})

    async def list_directory(
        self,
        pod_name: str,
        path: str = '/',
        recursive: bool = False
    ) -> DirectoryItem:
        """
        List a directory.

        Args:
            pod_name: Pod to read
            path: Absolute directory path
            recursive: Load all descendant directories too

        Returns:
            Directory tree
        """
        parts = get_path_parts(path)
        body = await self._request('GET', 'dir/ls', params={'pod_name': pod_name, 'dir_path': path})

        item = DirectoryItem(name=parts[-1], path=path)
        for raw in body.get('files') or []:
            item.files.append(FileItem.from_dict(raw, path))

        for raw in body.get('dirs') or []:
            child_path = f"{path.rstrip('/')}/{raw.get('name', '')}"
            if recursive:
                child = await self.list_directory(pod_name, child_path, True)
            else:
                child = DirectoryItem(name=raw.get('name', ''), path=child_path)
            item.directories.append(child)

        return item

    async def upload_content(
        self,
        pod_name: str,
        path: str,
        data: bytes,
        options: Optional[UploadOptions] = None
    ) -> None:
        """
        Upload file content into a pod.

        Args:
            pod_name: Target pod
            path: Absolute remote file path
            data: File content
            options: Block size, content type and compression
        """
        options = options or UploadOptions()
        info = extract_path_info(path)
        content_type = (
            options.content_type
            or mimetypes.guess_type(info.filename)[0]
            or 'application/octet-stream'
        )

        form = aiohttp.FormData()
        form.add_field('files', data, filename=info.filename, content_type=content_type)
        form.add_field('block_size', str(options.block_size))
        form.add_field('pod_name', pod_name)
        form.add_field('dir_path', info.path)

        headers = {}
        if options.compression:
            headers['fairOS-dfs-Compression'] = options.compression

        await self._request('POST', 'file/upload', data=form, headers=headers)
