from fastapi import APIRouter, Depends
from app.core.sessions import SessionRegistry
from app.dependencies import get_storage, get_sessions
from app.schemas.client import LoginRequest, LoginResponse
from app.schemas.common import ApiResponse
from app.services import client_service
from app.storage import Storage
from app.core.logging_config import logger

router = APIRouter()


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(
    credentials: LoginRequest,
    storage: Storage = Depends(get_storage),
    sessions: SessionRegistry = Depends(get_sessions)
):
    """
    Verify client credentials and open a session.
    
    The returned session_id is sent back as an Authorization Bearer token
    on every /api request. Sessions stay valid until the server restarts.
    
    Raises:
        Unauthenticated (401): If username or password is wrong
    """
    result = client_service.login(storage, sessions, credentials)
    logger.info(f"Client logged in: username={credentials.username}")
    return ApiResponse.ok(result, "Login successful")
