"""Pytest fixtures for fdpsync tests."""
from typing import Dict, List, Optional

import pytest

from fdpsync.core.api.models import DirectoryItem
from fdpsync.core.exceptions import AuthorizationError, RemoteAPIError
from fdpsync.core.files import SelectedFile
from fdpsync.core.upload.models import (
    ALREADY_EXISTS_MESSAGE,
    DirectoryCreateOutcome,
    UploadOptions,
)


class FakeDirectoryService:
    """In-memory remote directory API."""

    def __init__(self, existing=(), failing: Optional[Dict[str, str]] = None):
        self.existing = set(existing)
        self.failing = dict(failing or {})
        self.calls: List[str] = []
        self.created: List[str] = []
        self.removed: List[str] = []

    async def create_directory(self, pod_name: str, path: str) -> DirectoryCreateOutcome:
        self.calls.append(path)
        if path in self.failing:
            return DirectoryCreateOutcome.failed(self.failing[path])
        if path in self.existing:
            return DirectoryCreateOutcome.already_exists(
                f"mkdir: {path.rsplit('/', 1)[-1]} {ALREADY_EXISTS_MESSAGE}"
            )
        self.existing.add(path)
        self.created.append(path)
        return DirectoryCreateOutcome.created()

    async def remove_directory(self, pod_name: str, path: str) -> None:
        self.removed.append(path)
        self.existing.discard(path)

    async def list_directory(self, pod_name: str, path: str, recursive: bool = False) -> DirectoryItem:
        return DirectoryItem(name=path.rsplit('/', 1)[-1] or '/', path=path)


class FakeContentService:
    """In-memory remote content API."""

    def __init__(self, fail_on: Optional[str] = None):
        self.fail_on = fail_on
        self.uploads: Dict[str, bytes] = {}
        self.calls: List[str] = []
        self.options: List[UploadOptions] = []

    async def upload_content(self, pod_name: str, path: str, data: bytes, options: UploadOptions) -> None:
        self.calls.append(path)
        if path == self.fail_on:
            raise RemoteAPIError("upload failed: no postage", status=500)
        self.uploads[path] = data
        self.options.append(options)


class FakeAccount:
    """Account provider with configurable write access."""

    def __init__(self, writable: bool = True):
        self.writable = writable

    def assert_writable(self) -> None:
        if not self.writable:
            raise AuthorizationError("Account is read-only")


@pytest.fixture
def directory_service():
    return FakeDirectoryService()


@pytest.fixture
def content_service():
    return FakeContentService()


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def sample_tree(tmp_path):
    """
    Creates a local tree:

        root/a.txt
        root/sub/b.txt
        root/.hidden
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"file a")
    (root / "sub" / "b.txt").write_bytes(b"file b")
    (root / ".hidden").write_bytes(b"secret")
    return root


@pytest.fixture
def browser_files():
    """Browser selection of folder "base"."""
    return [
        SelectedFile("base/x.txt", b"x content"),
        SelectedFile("base/sub/y.txt", b"y content"),
    ]
