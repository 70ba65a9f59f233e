from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from ...schemas import Task, TaskCreate, TaskUpdate
from ..repositories import Repository

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
)


class TaskListEnvelope(BaseModel):
    """
    Envelope for the list response.
    """
    tasks: List[Task] = Field(..., description="Every quest, newest first")


def get_repository(request: Request) -> Repository:
    """
    Dependency returning the repository owned by the running app.
    """
    return request.app.state.repository


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TaskListEnvelope,
    summary="List Quests",
    description="List every quest, newest first.",
)
def list_tasks(repo: Repository = Depends(get_repository)) -> TaskListEnvelope:
    return TaskListEnvelope(tasks=[Task(**it) for it in repo.list()])


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Forge Quest",
    description="Create a new quest and return the created resource.",
    responses={
        201: {"description": "Quest created successfully"},
        422: {"description": "Validation error"},
    },
)
def create_task(payload: TaskCreate, repo: Repository = Depends(get_repository)) -> Task:
    created = repo.create(payload)
    return Task(**created)


# PUBLIC_INTERFACE
@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get Quest",
    responses={
        200: {"description": "Quest found"},
        404: {"description": "Quest not found"},
    },
)
def get_task(task_id: str, repo: Repository = Depends(get_repository)) -> Task:
    item = repo.get(task_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Task(**item)


# PUBLIC_INTERFACE
@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="Update Quest",
    description="Partially update fields of a quest. Clients toggle completion with {\"completed\": bool}.",
    responses={
        200: {"description": "Quest updated"},
        404: {"description": "Quest not found"},
    },
)
def patch_task(task_id: str, payload: TaskUpdate, repo: Repository = Depends(get_repository)) -> Task:
    updated = repo.update(task_id, payload)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Task(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Banish Quest",
    responses={
        204: {"description": "Quest deleted"},
        404: {"description": "Quest not found"},
    },
)
def delete_task(task_id: str, repo: Repository = Depends(get_repository)) -> None:
    if not repo.delete(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return None
