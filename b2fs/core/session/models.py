"""
Session and account data models.

Both models are immutable values. Every field is bounded: oversized
values are truncated on construction, never rejected.
"""
from dataclasses import dataclass

from ..utils import bounded

# Maximum field lengths (UTF-8 bytes).
ACCOUNT_ID_MAX_LEN = 15
APP_KEY_MAX_LEN = 63
TOKEN_MAX_LEN = 127


@dataclass(frozen=True)
class AccountCredentials:
    """
    Backblaze B2 account credentials read from the config file.
    
    Attributes:
        account_id: Account identifier (truncated to ACCOUNT_ID_MAX_LEN)
        application_key: Application key (truncated to APP_KEY_MAX_LEN)
    """
    account_id: str = ''
    application_key: str = ''
    
    def __post_init__(self):
        object.__setattr__(self, 'account_id', bounded(self.account_id, ACCOUNT_ID_MAX_LEN))
        object.__setattr__(
            self, 'application_key', bounded(self.application_key, APP_KEY_MAX_LEN)
        )
    
    def __repr__(self) -> str:
        return f"AccountCredentials(account_id={self.account_id!r}, application_key='***')"


@dataclass(frozen=True)
class Session:
    """
    Resolved B2 session: bearer token plus the two service endpoints.
    
    A session is only usable when ``is_valid()`` holds; invalid sessions
    are never handed out by the cache or the auth client.
    
    Attributes:
        authorization_token: Bearer token for subsequent API calls
        api_base_url: Base URL for API calls
        download_base_url: Base URL for file downloads
    """
    authorization_token: str
    api_base_url: str
    download_base_url: str
    
    def __post_init__(self):
        for name in ('authorization_token', 'api_base_url', 'download_base_url'):
            object.__setattr__(self, name, bounded(getattr(self, name), TOKEN_MAX_LEN))
    
    def is_valid(self) -> bool:
        """
        Check if session data is valid.
        
        Returns:
            True if all three fields are non-empty
        """
        return bool(
            self.authorization_token and
            self.api_base_url and
            self.download_base_url
        )
    
    def to_record(self) -> str:
        """Serialize to the on-disk cache record (one field per line)."""
        return (
            f"{self.authorization_token}\n"
            f"{self.api_base_url}\n"
            f"{self.download_base_url}\n"
        )
    
    @classmethod
    def from_record(cls, text: str) -> 'Session':
        """
        Create from a cache record.
        
        The first three lines fill the fields in order; missing lines
        leave the field empty.
        
        Args:
            text: Cache file contents
            
        Returns:
            Session instance (possibly invalid)
        """
        lines = text.splitlines()[:3]
        lines += [''] * (3 - len(lines))
        return cls(*lines)
    
    def is_recordable(self) -> bool:
        """Check that every field fits on a single cache record line."""
        return all(
            value.splitlines() == [value]
            for value in (self.authorization_token, self.api_base_url, self.download_base_url)
        )
    
    def __repr__(self) -> str:
        return (
            f"Session(authorization_token='***', api_base_url={self.api_base_url!r}, "
            f"download_base_url={self.download_base_url!r})"
        )
