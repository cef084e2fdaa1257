"""
Async B2 authorization client.

Performs the ``b2_authorize_account`` handshake and classifies every
outcome into the B2AuthError hierarchy.
"""
import asyncio
import base64
from typing import Optional, Tuple

import aiohttp

from ..logging import get_logger
from ..utils import bounded
from ..session.models import AccountCredentials, Session, TOKEN_MAX_LEN
from .config import APIConfig
from .response_parser import ResponseParser
from .errors import (
    GenericAuthError,
    NetworkAuthError,
    AccessDeniedError,
    InternalAPIError,
    APIContractError,
    ResponseParseError,
)

logger = get_logger('b2fs.api.auth')


class AsyncAuthClient:
    """
    Asynchronous B2 account authorization client.
    
    Issues exactly one request per ``authenticate`` call. There is no
    retry and no backoff: the first failure is reported to the caller.
    
    Example:
        >>> client = AsyncAuthClient()
        >>> session = await client.authenticate(
        ...     AccountCredentials('account', 'key'))
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        parser: Optional[ResponseParser] = None
    ):
        """
        Initialize auth client.
        
        Args:
            config: API configuration (uses defaults if not provided)
            parser: Response parser
        """
        self._config = config or APIConfig.default()
        self._parser = parser or ResponseParser()
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    @staticmethod
    def build_authorization_header(credentials: AccountCredentials) -> str:
        """
        Build the Basic authentication header value.

        Any value is accepted; credentials the server does not know are
        rejected remotely with 401.

        Args:
            credentials: Account credentials

        Returns:
            ``Basic <base64(account_id:application_key)>``
        """
        raw = f"{credentials.account_id}:{credentials.application_key}".encode('utf-8')
        return f"Basic {base64.b64encode(raw).decode()}"
    
    async def authenticate(self, credentials: AccountCredentials) -> Session:
        """
        Authorize the account and return the resulting session.
        
        Args:
            credentials: Account credentials
            
        Returns:
            Valid Session
            
        Raises:
            GenericAuthError: Request could not be constructed
            NetworkAuthError: Transport failure
            AccessDeniedError: HTTP 401
            InternalAPIError: Any other non-200 status
            APIContractError: HTTP 200 with an unusable body
        """
        header = self.build_authorization_header(credentials)
        status, body = await self._request(header)
        return self._handle_response(status, body)
    
    async def _request(self, authorization: str) -> Tuple[int, bytes]:
        """Send the authorization request, returning status and raw body."""
        try:
            request_kwargs = self._config.get_request_kwargs()
        except (OSError, ValueError) as e:
            raise GenericAuthError(f"Cannot configure request: {e}") from e
        
        logger.debug(f"Requesting authorization from {self._config.auth_url}")
        try:
            async with aiohttp.ClientSession(**self._config.get_session_kwargs()) as session:
                async with session.get(
                    self._config.auth_url,
                    headers={'Authorization': authorization},
                    **request_kwargs
                ) as response:
                    body = await response.read()
                    return response.status, body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            reason = str(e) or type(e).__name__
            raise NetworkAuthError(bounded(reason, TOKEN_MAX_LEN)) from e
    
    def _handle_response(self, status: int, body: bytes) -> Session:
        """Map an HTTP response to a Session or a classified error."""
        if status == 200:
            try:
                return self._parser.parse(body)
            except ResponseParseError as e:
                raise APIContractError(bounded(str(e), TOKEN_MAX_LEN)) from e
        
        if status == 401:
            raise AccessDeniedError()
        
        text = body.decode('utf-8', errors='replace')
        raise InternalAPIError(bounded(text, TOKEN_MAX_LEN), status=status)
