"""
Custom exceptions for b2fs.

This module defines the base exception classes shared by the
configuration, cache and API layers.
"""
from typing import Optional


class B2FSException(Exception):
    """Base exception for all b2fs errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class B2FSConfigError(B2FSException):
    """Exception raised for account configuration errors."""
    pass


class ConfigNotFoundError(B2FSConfigError):
    """Exception raised when the account config file cannot be opened."""
    
    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"Config file not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
