"""
Authorization response parser.

Turns the body of a successful ``b2_authorize_account`` response into a
Session. Only the top level of the JSON object is inspected; nested
values are never traversed.
"""
import json
from typing import Any, Dict, Union

from ..logging import get_logger
from ..session.models import Session
from .errors import ResponseParseError

logger = get_logger('b2fs.api.parser')


class ResponseParser:
    """
    Parses authorization responses into Sessions.

    Only string values are copied into the session. A recognized key
    holding a number, boolean, null, array or object is logged and left
    empty, so the response then fails the required-field check.
    """

    # Upper bound on JSON tokens (objects, arrays, keys and scalars).
    MAX_TOKENS = 256
    
    FIELD_MAP: Dict[str, str] = {
        'authorizationToken': 'authorization_token',
        'apiUrl': 'api_base_url',
        'downloadUrl': 'download_base_url',
    }
    IGNORED_KEYS = frozenset({'accountId'})
    
    @staticmethod
    def count_tokens(value: Any) -> int:
        """Count JSON tokens the way a flat tokenizer would."""
        if isinstance(value, dict):
            return 1 + sum(1 + ResponseParser.count_tokens(v) for v in value.values())
        if isinstance(value, list):
            return 1 + sum(ResponseParser.count_tokens(v) for v in value)
        return 1
    
    @staticmethod
    def parse(body: Union[str, bytes]) -> Session:
        """
        Parse an authorization response body.
        
        Args:
            body: Raw response body
            
        Returns:
            Valid Session
            
        Raises:
            ResponseParseError: If the body is not a JSON object, has too
                many tokens, or lacks a required field
        """
        if isinstance(body, bytes):
            try:
                body = body.decode('utf-8')
            except UnicodeDecodeError as e:
                raise ResponseParseError(f"Response is not UTF-8: {e}") from e
        
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ResponseParseError(f"Invalid JSON response: {e}") from e
        
        if not isinstance(data, dict):
            raise ResponseParseError("Response root is not a JSON object")
        
        if ResponseParser.count_tokens(data) > ResponseParser.MAX_TOKENS:
            raise ResponseParseError(
                f"Response exceeds {ResponseParser.MAX_TOKENS} JSON tokens"
            )
        
        fields = dict.fromkeys(ResponseParser.FIELD_MAP.values(), '')
        for key, value in data.items():
            if key in ResponseParser.FIELD_MAP:
                if isinstance(value, str):
                    fields[ResponseParser.FIELD_MAP[key]] = value
                else:
                    logger.debug(f"Unexpected non-string value for key in authentication: {key}")
            elif key not in ResponseParser.IGNORED_KEYS:
                logger.debug(f"Encountered unexpected key in authentication: {key}")
        
        session = Session(**fields)
        if not session.is_valid():
            missing = [k for k, v in ResponseParser.FIELD_MAP.items() if not fields[v]]
            raise ResponseParseError(f"Response missing required fields: {', '.join(missing)}")
        
        return session
