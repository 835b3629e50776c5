from fastapi import APIRouter, Depends, status
from typing import List
from app.dependencies import get_storage
from app.schemas.common import ApiResponse
from app.schemas.task import TaskCreate, TaskStatusUpdate, TaskResponse
from app.services import task_service
from app.storage import Storage
from app.core.tenant_context import get_tenant_id
from app.core.logging_config import logger

router = APIRouter()


@router.get("", response_model=ApiResponse[List[TaskResponse]])
def get_tasks(
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Retrieve all tasks for your tenant, newest first.
    """
    tasks = task_service.get_tasks(storage, _tenant_id)
    return ApiResponse.ok([TaskResponse.model_validate(t) for t in tasks], "Tasks retrieved")


@router.post("", response_model=ApiResponse[TaskResponse], status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    logger.info(f"Creating task: title={task_data.title}, tenant_id={_tenant_id}")
    result = task_service.create_task(storage, task_data, _tenant_id)
    return ApiResponse.ok(TaskResponse.model_validate(result), "Task created")


@router.put("/{task_id}", response_model=ApiResponse[None])
def update_task_status(
    task_id: str,
    task_status: TaskStatusUpdate,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Mark a task done or not done.
    
    Raises:
        NotFoundOrNotOwned (404): If the task doesn't exist or isn't yours
    """
    task_service.set_done(storage, task_id, _tenant_id, task_status.done)
    return ApiResponse.ok(None, "Task updated")


@router.delete("/{task_id}", response_model=ApiResponse[None])
def delete_task(
    task_id: str,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    task_service.delete_task(storage, task_id, _tenant_id)
    logger.info(f"Task deleted: id={task_id}, tenant_id={_tenant_id}")
    return ApiResponse.ok(None, "Task deleted")
