"""
Account config loader.

Reads B2 account credentials from a two-line file::

    account_id: <account id>
    app_key: <application key>
"""
from pathlib import Path
from typing import Dict, List, Union

from .logging import get_logger
from .exceptions import ConfigNotFoundError
from .session.models import AccountCredentials

logger = get_logger('b2fs.config')


class ConfigLoader:
    """
    Loads AccountCredentials from a config file.
    
    Exactly two key/value pairs are read. An unrecognized key is reported
    as a malformed config but does not abort loading: its value is
    dropped and the matching credential stays empty, so the failure
    surfaces remotely as rejected credentials.
    """
    
    DEFAULT_PATH = 'b2fs.yml'
    PAIRS = 2
    KEYS: Dict[str, str] = {
        'account_id:': 'account_id',
        'app_key:': 'application_key',
    }
    
    @classmethod
    def load(cls, path: Union[str, Path] = DEFAULT_PATH) -> AccountCredentials:
        """
        Load credentials from ``path``.
        
        Args:
            path: Config file path
            
        Returns:
            AccountCredentials (fields may be empty if the file is malformed)
            
        Raises:
            ConfigNotFoundError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigNotFoundError(str(path), str(e)) from e
        
        return cls.parse(text)
    
    @classmethod
    def parse(cls, text: str) -> AccountCredentials:
        """
        Parse config file contents.
        
        Args:
            text: Raw config text
            
        Returns:
            AccountCredentials
        """
        tokens: List[str] = text.split()
        values = dict.fromkeys(cls.KEYS.values(), '')
        
        for i in range(cls.PAIRS):
            pair = tokens[2 * i:2 * i + 2]
            key = pair[0] if pair else ''
            field_name = cls.KEYS.get(key)
            if field_name is None or len(pair) < 2:
                logger.error("Malformed config file.")
                continue
            values[field_name] = pair[1]
        
        if len(tokens) > 2 * cls.PAIRS:
            logger.warning("Ignoring unexpected content after the first two config entries")
        
        return AccountCredentials(**values)
