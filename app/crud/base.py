from typing import Generic, TypeVar, Type, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """
    Generic CRUD class with tenant isolation via explicit client_id.
    
    Every statement that addresses a single row filters by the row id AND
    the owning client_id in the same WHERE clause. Client ID is always
    passed explicitly from the service layer.
    
    Type Parameters:
        ModelType: SQLAlchemy model class (must have ``id`` and ``client_id``)
    """
    
    def __init__(self, model: Type[ModelType], order_by: Any):
        """
        Initialize CRUD object with model class.
        
        Args:
            model: SQLAlchemy model class
            order_by: Column expression that defines list ordering
        """
        self.model = model
        self.order_by = order_by
    
    def get_multi(self, db: Session, *, client_id: str) -> List[ModelType]:
        """
        Retrieve all records of a client in the model's defined order.
        
        Args:
            db: Database session
            client_id: Client ID for isolation
            
        Returns:
            List of model instances belonging to the client
        """
        stmt = select(self.model).where(
            self.model.client_id == client_id
        ).order_by(self.order_by)
        result = db.execute(stmt)
        return list(result.scalars().all())
    
    def create(self, db: Session, *, db_obj: ModelType) -> ModelType:
        """
        Insert a fully built record.
        
        The object must already carry its id and client_id.
        """
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
    
    def update_fields(
        self,
        db: Session,
        *,
        id: str,
        client_id: str,
        values: Dict[str, Any]
    ) -> int:
        """
        Update columns of one record owned by the client.
        
        Returns:
            Number of rows affected (0 or 1)
        """
        stmt = update(self.model).where(
            self.model.id == id,
            self.model.client_id == client_id
        ).values(**values).execution_options(synchronize_session=False)
        result = db.execute(stmt)
        db.commit()
        return result.rowcount
    
    def delete(self, db: Session, *, id: str, client_id: str) -> int:
        """
        Delete a record by ID with tenant filtering.
        
        Returns:
            Number of rows deleted (0 or 1)
        """
        stmt = delete(self.model).where(
            self.model.id == id,
            self.model.client_id == client_id
        ).execution_options(synchronize_session=False)
        result = db.execute(stmt)
        db.commit()
        return result.rowcount
