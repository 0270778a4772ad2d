# interfaces/api.py
from fastapi import APIRouter, Body, Depends, Request, status
from schemas.task import TaskCreate, TaskResponse
from application.use_cases import TaskUseCases
from domain.entities import Task
from typing import Any, List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

def get_use_cases(request: Request) -> TaskUseCases:
    """Returns the use cases bound to the running app's store."""
    return request.app.state.use_cases

def to_response(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, title=task.title, completed=task.completed)

def parse_task_create(body: Any) -> TaskCreate:
    """Anything other than a JSON object (no body, arrays, scalars, non-JSON text) carries no title."""
    if isinstance(body, dict):
        return TaskCreate.model_validate(body)
    return TaskCreate()

@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    tasks = use_cases.get_all_tasks()
    return [to_response(task) for task in tasks]

@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(body: Any = Body(default=None), use_cases: TaskUseCases = Depends(get_use_cases)):
    task = parse_task_create(body)
    created_task = use_cases.create_task(task.title)
    logger.info(f"Created task {created_task.id}")
    return to_response(created_task)
