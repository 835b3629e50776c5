from sqlalchemy import Column, String, Boolean, ForeignKey, Index
from app.database import Base, TimestampMixin, new_id

class Task(Base, TimestampMixin):
    __tablename__ = "tasks"
    __table_args__ = (Index("idx_tasks_client", "client_id"),)

    id = Column(String, primary_key=True, default=new_id)
    client_id = Column(String, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    priority = Column(String, nullable=False)
    done = Column(Boolean, default=False, nullable=False)
