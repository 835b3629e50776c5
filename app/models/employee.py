from sqlalchemy import Column, String, Float, Boolean, ForeignKey, Index
from app.database import Base, TimestampMixin, new_id

class Employee(Base, TimestampMixin):
    __tablename__ = "employees"
    __table_args__ = (Index("idx_employees_client", "client_id"),)

    id = Column(String, primary_key=True, default=new_id)
    client_id = Column(String, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    title = Column(String, nullable=False)
    salary = Column(Float, nullable=False)
    status = Column(String, nullable=False)
    paid = Column(Boolean, default=False, nullable=False)
