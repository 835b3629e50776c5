from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.employee import Employee


class CRUDEmployee(CRUDBase[Employee]):
    """CRUD operations for Employee model, listed by name."""

    def set_paid(self, db: Session, *, id: str, client_id: str, paid: bool) -> int:
        return self.update_fields(db, id=id, client_id=client_id, values={"paid": paid})


# Create a singleton instance
employee = CRUDEmployee(Employee, order_by=Employee.name.asc())
