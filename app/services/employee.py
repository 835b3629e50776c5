from typing import List
from app.core.exceptions import NotFoundOrNotOwned
from app.database import new_id, utc_now
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate
from app.storage import Storage


class EmployeeService:
    """
    Service layer for employee business logic.
    
    Turns a zero affected-row count into NotFoundOrNotOwned; callers
    never learn whether the row exists under another client.
    """
    
    def get_employees(self, storage: Storage, client_id: str) -> List[Employee]:
        """
        Get all employees of a client, ordered by name.
        """
        return storage.list_employees(client_id)
    
    def create_employee(
        self,
        storage: Storage,
        employee_data: EmployeeCreate,
        client_id: str
    ) -> Employee:
        """
        Create a new employee. New employees start unpaid.
        
        Args:
            storage: Persistence engine
            employee_data: Employee creation data
            client_id: Owning client
            
        Returns:
            Created Employee instance
        """
        employee = Employee(
            id=new_id(),
            client_id=client_id,
            paid=False,
            created_at=utc_now(),
            **employee_data.model_dump()
        )
        return storage.create_employee(employee)
    
    def set_paid(self, storage: Storage, employee_id: str, client_id: str, paid: bool) -> None:
        """
        Raises:
            NotFoundOrNotOwned: If no employee of this client has the id
        """
        updated = storage.update_employee_paid(employee_id, client_id, paid)
        if not updated:
            raise NotFoundOrNotOwned("Employee not found")
    
    def delete_employee(self, storage: Storage, employee_id: str, client_id: str) -> None:
        """
        Delete an employee.
        
        Raises:
            NotFoundOrNotOwned: If no employee of this client has the id
        """
        deleted = storage.delete_employee(employee_id, client_id)
        if not deleted:
            raise NotFoundOrNotOwned("Employee not found")


# Create a singleton instance
employee_service = EmployeeService()
