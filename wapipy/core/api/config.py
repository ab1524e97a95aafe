"""
API configuration module.

Provides the read-only transport configuration for the Graph API client:
endpoint location, API version, access credential and connection settings.
Built once and injected into the components that need it.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import os
import ssl


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password and '://' in self.url:
            protocol, rest = self.url.split('://', 1)
            return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context, or False to disable verification."""
        if not self.verify:
            return False

        context = ssl.create_default_context()
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        context.check_hostname = self.check_hostname
        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Media pushes can be large, so the total budget is generous.
    """
    total: float = 300.0
    connect: float = 30.0
    sock_read: float = 120.0

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass(frozen=True)
class APIConfig:
    """
    Complete API configuration.

    Frozen so that components holding a reference (the resumable uploader
    builds its own request URLs from it) never see it change underneath them.
    """
    access_token: str = ''

    # Endpoint settings
    protocol: str = 'https'
    base_url: str = 'graph.facebook.com'
    api_version: str = 'v21.0'

    messaging_product: str = 'whatsapp'
    user_agent: str = 'wapipy/0.1.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    log_level: int = 20  # logging.INFO

    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100

    @classmethod
    def default(cls, access_token: str = '') -> 'APIConfig':
        """Create default configuration."""
        return cls(access_token=access_token)

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(proxy=ProxyConfig(url=proxy_url), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False, check_hostname=False), **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> 'APIConfig':
        """
        Create configuration from environment variables.

        Reads WAPI_ACCESS_TOKEN, WAPI_API_VERSION and WAPI_BASE_URL.
        Explicit keyword arguments win over the environment.
        """
        env = {
            'access_token': os.environ.get('WAPI_ACCESS_TOKEN'),
            'api_version': os.environ.get('WAPI_API_VERSION'),
            'base_url': os.environ.get('WAPI_BASE_URL'),
        }
        values = {k: v for k, v in env.items() if v}
        values.update(kwargs)
        return cls(**values)

    @property
    def endpoint(self) -> str:
        """Versioned API root, without trailing slash."""
        return f"{self.protocol}://{self.base_url}/{self.api_version}"

    def build_url(self, path: str) -> str:
        """Join a relative API path onto the versioned endpoint."""
        return f"{self.endpoint}/{path.lstrip('/')}"

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': {'User-Agent': self.user_agent},
            'timeout': self.timeout.to_aiohttp_timeout(),
        }

    def default_headers(self) -> Dict[str, str]:
        """Headers applied to every call except the raw escape hatch."""
        headers = {'Authorization': f"Bearer {self.access_token}"}
        headers.update(self.extra_headers)
        return headers
