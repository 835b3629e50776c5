from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.client import Client


class CRUDClient:
    """
    CRUD operations for Client model.
    
    Note: Client doesn't have client_id (it IS the tenant), so we don't
    inherit from CRUDBase. Lookups here are global by definition: they
    run before any tenant is known.
    """
    
    def __init__(self):
        self.model = Client
    
    def get_by_username(self, db: Session, username: str) -> Optional[Client]:
        """
        Retrieve a client by login name.
        
        Args:
            db: Database session
            username: Login name
            
        Returns:
            Client instance or None if not found
        """
        stmt = select(Client).where(Client.username == username)
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def create(self, db: Session, *, db_obj: Client) -> Client:
        """
        Insert a new client.
        
        Raises:
            IntegrityError: If the username is already taken
        """
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


# Create singleton instance
client = CRUDClient()
