"""
Session storage protocols.

Defines the interface shared by session storage implementations.
"""
from typing import Protocol, Optional, runtime_checkable
from .models import Session


@runtime_checkable
class SessionStorage(Protocol):
    """
    Protocol for session storage implementations.
    
    ``load`` only ever returns valid sessions; anything else reads as a
    cache miss.
    """
    
    def load(self) -> Optional[Session]:
        """
        Load a session from storage.
        
        Returns:
            Session if a valid one is stored, None otherwise
        """
        ...
    
    def save(self, session: Session) -> None:
        """
        Save a session to storage, replacing any previous one.
        
        Args:
            session: Session to save
        """
        ...
    
    def delete(self) -> None:
        """Delete the stored session."""
        ...
    
    def exists(self) -> bool:
        """
        Check if a session record exists in storage.
        
        Returns:
            True if a record exists (valid or not)
        """
        ...
    
    def close(self) -> None:
        """Release any resources held by the storage."""
        ...
