"""
API configuration module.

Provides configuration for the B2 authorization client.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union
import ssl


@dataclass
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration (False disables verification)."""
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
    
    Only applied when set on APIConfig; otherwise aiohttp's defaults
    are used unchanged.
    """
    total: Optional[float] = None
    connect: Optional[float] = None
    sock_read: Optional[float] = None
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Centralizes all configuration options for the authorization client.
    """
    # Account authorization endpoint
    auth_url: str = 'https://api.backblaze.com/b2api/v1/b2_authorize_account'
    
    user_agent: str = 'b2fs/1.0.0'
    
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: Optional[TimeoutConfig] = None
    
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        kwargs: Dict[str, Any] = {
            'headers': {
                'User-Agent': self.user_agent,
                **self.extra_headers
            },
        }
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout.to_aiohttp_timeout()
        return kwargs
    
    def get_request_kwargs(self) -> Dict[str, Any]:
        """Get per-request kwargs (TLS and proxy settings)."""
        kwargs: Dict[str, Any] = {'ssl': self.ssl.create_ssl_context()}
        if self.proxy is not None:
            proxy = self.proxy.to_aiohttp_proxy()
            if proxy:
                kwargs['proxy'] = proxy
        return kwargs
