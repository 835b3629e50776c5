from typing import List
from app.core.exceptions import NotFoundOrNotOwned
from app.database import new_id, utc_now
from app.models.event import Event
from app.schemas.event import EventCreate
from app.storage import Storage


class EventService:
    """
    Service layer for calendar events.
    
    Events have no update operation; they are created and deleted.
    """
    
    def get_events(self, storage: Storage, client_id: str) -> List[Event]:
        """
        Get all events of a client, earliest start date first.
        """
        return storage.list_events(client_id)
    
    def create_event(self, storage: Storage, event_data: EventCreate, client_id: str) -> Event:
        event = Event(
            id=new_id(),
            client_id=client_id,
            created_at=utc_now(),
            **event_data.model_dump()
        )
        return storage.create_event(event)
    
    def delete_event(self, storage: Storage, event_id: str, client_id: str) -> None:
        """
        Raises:
            NotFoundOrNotOwned: If no event of this client has the id
        """
        deleted = storage.delete_event(event_id, client_id)
        if not deleted:
            raise NotFoundOrNotOwned("Event not found")


# Create a singleton instance
event_service = EventService()
