"""
Upload module for pod directory uploads.

Plans the remote directories a file set needs and uploads the files once
they exist.
"""
from .models import (
    Environment,
    UploadOptions,
    UploadDirectoryOptions,
    DirectoryCreateStatus,
    DirectoryCreateOutcome,
    UploadProgress,
    DirectoryUploadResult,
    is_already_exists_message,
)
from .planner import DirectoryPlan, compute_plan
from .protocols import (
    DirectoryServiceProtocol,
    ContentServiceProtocol,
    AccountProtocol,
)
from .orchestrator import UploadOrchestrator

__all__ = [
    # Main classes
    'UploadOrchestrator',
    'DirectoryPlan',
    'compute_plan',

    # Models
    'Environment',
    'UploadOptions',
    'UploadDirectoryOptions',
    'DirectoryCreateStatus',
    'DirectoryCreateOutcome',
    'UploadProgress',
    'DirectoryUploadResult',
    'is_already_exists_message',

    # Protocols
    'DirectoryServiceProtocol',
    'ContentServiceProtocol',
    'AccountProtocol',
]
