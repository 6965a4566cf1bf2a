"""FairOS-dfs gateway API module."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .models import DirectoryItem, FileItem
from .client import FairOSClient

__all__ = [
    # Client
    'FairOSClient',

    # Models
    'DirectoryItem',
    'FileItem',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
]
