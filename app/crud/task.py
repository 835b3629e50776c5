from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.task import Task


class CRUDTask(CRUDBase[Task]):
    """CRUD operations for Task model, newest first."""

    def set_done(self, db: Session, *, id: str, client_id: str, done: bool) -> int:
        return self.update_fields(db, id=id, client_id=client_id, values={"done": done})


# Create a singleton instance
task = CRUDTask(Task, order_by=Task.created_at.desc())
