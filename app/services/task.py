from typing import List
from app.core.exceptions import NotFoundOrNotOwned
from app.database import new_id, utc_now
from app.models.task import Task
from app.schemas.task import TaskCreate
from app.storage import Storage


class TaskService:
    """Service layer for tasks; tasks start out not done."""
    
    def get_tasks(self, storage: Storage, client_id: str) -> List[Task]:
        return storage.list_tasks(client_id)
    
    def create_task(self, storage: Storage, task_data: TaskCreate, client_id: str) -> Task:
        task = Task(
            id=new_id(),
            client_id=client_id,
            done=False,
            created_at=utc_now(),
            **task_data.model_dump()
        )
        return storage.create_task(task)
    
    def set_done(self, storage: Storage, task_id: str, client_id: str, done: bool) -> None:
        updated = storage.update_task_done(task_id, client_id, done)
        if not updated:
            raise NotFoundOrNotOwned("Task not found")
    
    def delete_task(self, storage: Storage, task_id: str, client_id: str) -> None:
        deleted = storage.delete_task(task_id, client_id)
        if not deleted:
            raise NotFoundOrNotOwned("Task not found")


# Create a singleton instance
task_service = TaskService()
