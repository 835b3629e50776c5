from fastapi import APIRouter, Depends
from app.dependencies import get_storage
from app.schemas.common import ApiResponse
from app.schemas.dashboard import DashboardStats
from app.services import dashboard_service
from app.storage import Storage
from app.core.tenant_context import get_tenant_id

router = APIRouter()


@router.get("", response_model=ApiResponse[DashboardStats])
def get_dashboard(
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Employee count, payroll total, open tasks and event count for your tenant.
    """
    stats = dashboard_service.get_stats(storage, _tenant_id)
    return ApiResponse.ok(stats, "Dashboard stats retrieved")
