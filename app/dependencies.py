from fastapi import Request
from app.core.exceptions import Unauthenticated
from app.core.sessions import SessionRegistry
from app.storage import Storage


def get_storage(request: Request) -> Storage:
    """Return the store opened at application startup."""
    return request.app.state.storage


def get_sessions(request: Request) -> SessionRegistry:
    """Return the session registry created at application startup."""
    return request.app.state.sessions


def get_current_client_id(request: Request) -> str:
    """
    Resolve the Authorization Bearer header to a client id.
    
    The core never refreshes or renews sessions: a token that is not in
    the registry rejects the whole request.
    
    Args:
        request: FastAPI Request to extract Authorization header
    
    Returns:
        Client ID bound to the bearer token
    
    Raises:
        Unauthenticated: If the header is missing or the token is unknown
    """
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthenticated()
    
    token = authorization[len("Bearer "):]
    client_id = get_sessions(request).resolve(token)
    
    if client_id is None:
        raise Unauthenticated()
    
    return client_id
