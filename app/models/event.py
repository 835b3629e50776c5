from sqlalchemy import Column, String, ForeignKey, Index
from app.database import Base, TimestampMixin, new_id

class Event(Base, TimestampMixin):
    """
    A calendar entry. Dates and times are kept as the text the client sent
    (e.g. ``2025-03-01`` and ``09:30``); events are only created and deleted.
    """
    __tablename__ = "events"
    __table_args__ = (Index("idx_events_client", "client_id"),)

    id = Column(String, primary_key=True, default=new_id)
    client_id = Column(String, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    start_date = Column(String, nullable=False)
    start_time = Column(String, nullable=True)
    end_date = Column(String, nullable=False)
    end_time = Column(String, nullable=True)
    color = Column(String, nullable=False)
