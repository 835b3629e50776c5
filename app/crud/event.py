from app.crud.base import CRUDBase
from app.models.event import Event


class CRUDEvent(CRUDBase[Event]):
    """CRUD operations for Event model, by start date."""


# Create a singleton instance
event = CRUDEvent(Event, order_by=Event.start_date.asc())
