from fastapi import Depends
from app.dependencies import get_current_client_id


def get_tenant_id(client_id: str = Depends(get_current_client_id)) -> str:
    """
    FastAPI dependency that yields the tenant of the authenticated request.
    
    This dependency should be added to all routes that need tenant isolation.
    The tenant id is then passed explicitly through service and storage
    layers; nothing below the router infers it any other way.
    
    Args:
        client_id: Client resolved from the bearer token
        
    Returns:
        Tenant (client) ID of the caller
    """
    return client_id
