import threading
from typing import Dict, Optional
from app.core.security import generate_session_token
from app.core.logging_config import logger


class SessionRegistry:
    """
    In-memory map of bearer tokens to client (tenant) ids.
    
    One instance is created at application startup and handed to the
    request layer through ``app.state``. Sessions live until the process
    exits: there is no expiry and no logout.
    
    The internal lock only guards the token map and is never held while
    calling into storage.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, str] = {}
    
    def create_session(self, client_id: str) -> str:
        """
        Bind a fresh token to a client id.
        
        Args:
            client_id: Id of the authenticated client
            
        Returns:
            The new bearer token
        """
        token = generate_session_token()
        with self._lock:
            self._sessions[token] = client_id
        logger.info(f"Session created for client_id={client_id}")
        return token
    
    def resolve(self, token: Optional[str]) -> Optional[str]:
        """
        Look up the client id bound to a token.
        
        Returns None for unknown, empty or malformed tokens.
        """
        if not token or not isinstance(token, str):
            return None
        with self._lock:
            return self._sessions.get(token)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
