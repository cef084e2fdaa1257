"""Pytest fixtures for b2fs tests."""
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from b2fs.core.session import Session, CredentialCache


AUTH_BODY = {
    'authorizationToken': 'T',
    'apiUrl': 'A',
    'downloadUrl': 'D',
    'accountId': 'ABC',
}


def make_client_session(status: int = 200, body: bytes = b'', error: Exception = None):
    """Build a mock aiohttp.ClientSession answering one GET request."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    
    request_ctx = MagicMock()
    request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=None)
    
    session = MagicMock()
    if error is not None:
        session.get = MagicMock(side_effect=error)
    else:
        session.get = MagicMock(return_value=request_ctx)
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)
    return session


@pytest.fixture
def mock_http(monkeypatch):
    """
    Install a mock aiohttp.ClientSession.
    
    Returns a function taking the same arguments as make_client_session;
    it returns the ClientSession class mock so calls can be inspected.
    """
    def install(status: int = 200, body=b'', error: Exception = None):
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode()
        session_cls = MagicMock(return_value=make_client_session(status, body, error))
        monkeypatch.setattr(aiohttp, 'ClientSession', session_cls)
        return session_cls
    return install


@pytest.fixture
def auth_body():
    """Returns a successful b2_authorize_account response body."""
    return dict(AUTH_BODY)


@pytest.fixture
def sample_session():
    """Returns a valid session."""
    return Session('tok123', 'https://api.example', 'https://dl.example')


@pytest.fixture
def cache(tmp_path):
    """Returns a credential cache rooted in a temporary directory."""
    return CredentialCache(tmp_path)


@pytest.fixture
def config_file(tmp_path):
    """Writes an account config file and returns its path."""
    path = tmp_path / 'b2fs.yml'
    path.write_text('account_id: ABC\napp_key: XYZ\n')
    return path
