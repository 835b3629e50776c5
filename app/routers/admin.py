from typing import Optional
from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, Field
from app.core.config import settings
from app.core.exceptions import QadsError
from app.dependencies import get_storage
from app.schemas.common import ApiResponse
from app.storage import Storage
from app.core.logging_config import logger

router = APIRouter()


class BackupRequest(BaseModel):
    path: str = Field(..., min_length=1)


def verify_admin_key(x_admin_key: Optional[str] = Header(None)):
    """Verify the admin API key from the request header."""
    if not settings.ADMIN_API_KEY or x_admin_key != settings.ADMIN_API_KEY:
        raise QadsError("Invalid admin API key", http_status=403)


@router.post("/backup", response_model=ApiResponse[None])
def backup_database(
    request: BackupRequest,
    storage: Storage = Depends(get_storage),
    _: None = Depends(verify_admin_key)
):
    """
    Write an online copy of the SQLite database to a file.
    
    Protected by x-admin-key header.
    """
    storage.backup(request.path)
    return ApiResponse.ok(None, "Backup completed")


@router.post("/restore", response_model=ApiResponse[None])
def restore_database(
    request: BackupRequest,
    storage: Storage = Depends(get_storage),
    _: None = Depends(verify_admin_key)
):
    """
    Replace the live database with a backup file.
    
    Sessions are kept; they may now point at clients that no longer exist,
    in which case every scoped call simply affects no rows.
    """
    logger.warning(f"Restoring database from {request.path}")
    storage.restore(request.path)
    return ApiResponse.ok(None, "Restore completed")


@router.post("/vacuum", response_model=ApiResponse[None])
def vacuum_database(
    storage: Storage = Depends(get_storage),
    _: None = Depends(verify_admin_key)
):
    storage.vacuum()
    return ApiResponse.ok(None, "Vacuum completed")
