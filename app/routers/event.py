from fastapi import APIRouter, Depends, status
from typing import List
from app.dependencies import get_storage
from app.schemas.common import ApiResponse
from app.schemas.event import EventCreate, EventResponse
from app.services import event_service
from app.storage import Storage
from app.core.tenant_context import get_tenant_id
from app.core.logging_config import logger

router = APIRouter()


@router.get("", response_model=ApiResponse[List[EventResponse]])
def get_events(
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Retrieve all calendar events for your tenant, by start date.
    """
    events = event_service.get_events(storage, _tenant_id)
    return ApiResponse.ok([EventResponse.model_validate(e) for e in events], "Events retrieved")


@router.post("", response_model=ApiResponse[EventResponse], status_code=status.HTTP_201_CREATED)
def create_event(
    event_data: EventCreate,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Create a calendar event.
    
    Description, start time and end time are optional.
    """
    logger.info(f"Creating event: title={event_data.title}, tenant_id={_tenant_id}")
    result = event_service.create_event(storage, event_data, _tenant_id)
    logger.info(f"Event created successfully: id={result.id}")
    return ApiResponse.ok(EventResponse.model_validate(result), "Event created")


@router.delete("/{event_id}", response_model=ApiResponse[None])
def delete_event(
    event_id: str,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Delete a calendar event.
    
    Raises:
        NotFoundOrNotOwned (404): If the event doesn't exist or isn't yours
    """
    event_service.delete_event(storage, event_id, _tenant_id)
    return ApiResponse.ok(None, "Event deleted")
