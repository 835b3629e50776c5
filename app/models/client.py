from sqlalchemy import Column, String
from app.database import Base, TimestampMixin, new_id

class Client(Base, TimestampMixin):
    """
    A business account and the unit of data isolation.
    
    Clients are created once through onboarding and never updated.
    """
    __tablename__ = "clients"

    id = Column(String, primary_key=True, default=new_id)
    business_name = Column(String, nullable=False)
    business_website = Column(String, nullable=True)
    business_sector = Column(String, nullable=True)
    revenue = Column(String, nullable=True)
    goals = Column(String, nullable=True)
    email = Column(String, nullable=True)
    job_title = Column(String, nullable=True)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
