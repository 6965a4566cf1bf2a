"""
API configuration module.

Provides configuration for the FairOS-dfs gateway client.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl

import aiohttp


@dataclass
class ProxyConfig:
    """
    Proxy the gateway is reached through.

    Credentials are sent with aiohttp's proxy_auth, never spliced into the URL.
    """
    url: str
    username: Optional[str] = None
    password: Optional[str] = None

    def request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for aiohttp request calls."""
        kwargs: Dict[str, Any] = {'proxy': self.url}
        if self.username:
            kwargs['proxy_auth'] = aiohttp.BasicAuth(self.username, self.password or '')
        return kwargs


@dataclass
class SSLConfig:
    """
    TLS settings for https gateways.

    Attributes:
        verify: Verify the gateway certificate
        ca_file: Extra CA bundle, e.g. for a self-signed local gateway
    """
    verify: bool = True
    ca_file: Optional[str] = None

    def connector_ssl(self) -> Any:
        """Value for TCPConnector's ssl argument."""
        if not self.verify:
            return False
        if self.ca_file:
            return ssl.create_default_context(cafile=self.ca_file)
        return True


@dataclass
class TimeoutConfig:
    """
    Request timeouts in seconds.

    There is no overall limit by default since a single file upload can
    take arbitrarily long on a slow link.
    """
    total: Optional[float] = None
    connect: float = 30.0
    sock_read: float = 120.0

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.total, connect=self.connect, sock_read=self.sock_read)


@dataclass
class APIConfig:
    """
    Gateway client configuration.

    Calls are sent one at a time and never retried, so the connection pool
    stays small.

    Example:
        >>> APIConfig(gateway="https://fairos.example.com").v1_url("dir/ls")
        'https://fairos.example.com/v1/dir/ls'
    """
    gateway: str = 'http://localhost:9090/'
    user_agent: str = 'fdpsync/1.0.0'

    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    extra_headers: Dict[str, str] = field(default_factory=dict)

    log_level: int = 20  # logging.INFO
    limit: int = 4

    def __post_init__(self):
        if not self.gateway.endswith('/'):
            self.gateway += '/'

    @classmethod
    def default(cls) -> 'APIConfig':
        return cls()

    @classmethod
    def with_proxy(
        cls,
        proxy_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        **kwargs
    ) -> 'APIConfig':
        """Configuration that reaches the gateway through a proxy."""
        return cls(proxy=ProxyConfig(proxy_url, username, password), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Configuration without certificate verification (local test gateways)."""
        return cls(ssl=SSLConfig(verify=False), **kwargs)

    def v1_url(self, method: str) -> str:
        """URL of a v1 gateway method, e.g. 'dir/mkdir'."""
        return f"{self.gateway}v1/{method}"

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {'limit': self.limit, 'ssl': self.ssl.connector_ssl()}

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': {'User-Agent': self.user_agent, **self.extra_headers},
            'timeout': self.timeout.client_timeout(),
        }

    def get_request_kwargs(self) -> Dict[str, Any]:
        """Get per-request kwargs (proxy settings)."""
        return self.proxy.request_kwargs() if self.proxy else {}
