from app.core.logging_config import logger
from app.schemas.dashboard import DashboardStats
from app.storage import Storage


class DashboardService:
    """
    Dashboard statistics, recomputed from the store on every call.
    
    "monthly_payroll" is the sum of all current salaries; it is not a
    time-windowed figure.
    """
    
    def get_stats(self, storage: Storage, client_id: str) -> DashboardStats:
        stats = storage.get_dashboard_stats(client_id)
        logger.debug(f"Dashboard stats for client_id={client_id}: {stats.model_dump()}")
        return stats


dashboard_service = DashboardService()
