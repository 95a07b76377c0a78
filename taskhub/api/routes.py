"""Task CRUD and undo/redo routes."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Response

from taskhub.domain.entities import TaskRecord
from taskhub.domain.tasks import UnknownTaskTypeError
from taskhub.services.command_factory import CommandError
from taskhub.services.task_service import TaskService

from .dependencies import get_task_service
from .schemas import (
    BatchResponse,
    CommandSpec,
    HistoryResponse,
    HistoryState,
    TaskCreate,
    TaskDisplay,
    TaskResponse,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


def _state(service: TaskService, success: bool) -> HistoryState:
    return HistoryState(
        success=success,
        can_undo=service.invoker.can_undo(),
        can_redo=service.invoker.can_redo(),
    )


def _serialize(result: Any) -> Any:
    if isinstance(result, TaskRecord):
        return TaskResponse.model_validate(result).model_dump(mode="json")
    return result


@router.get("", response_model=List[TaskResponse])
def list_tasks(service: TaskService = Depends(get_task_service)):
    return service.list_tasks()


@router.get("/history", response_model=HistoryResponse)
def get_history(service: TaskService = Depends(get_task_service)):
    return HistoryResponse(
        history=service.history(),
        can_undo=service.invoker.can_undo(),
        can_redo=service.invoker.can_redo(),
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    task = service.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("/{task_id}/display", response_model=TaskDisplay)
def get_task_display(task_id: str, service: TaskService = Depends(get_task_service)):
    display = service.describe_task(task_id)
    if display is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskDisplay(
        id=task_id,
        title=display.title,
        description=display.description,
        priority=display.priority,
    )


@router.post("", response_model=TaskResponse, status_code=201)
def create_task(payload: TaskCreate, service: TaskService = Depends(get_task_service)):
    if not payload.title or not payload.type:
        raise HTTPException(status_code=400, detail="Title and type are required")
    try:
        return service.create_task(payload.model_dump(exclude_none=True))
    except (CommandError, UnknownTaskTypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    try:
        task = service.update_task(task_id, payload.model_dump(exclude_unset=True))
    except CommandError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    if not service.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=204)


@router.post("/batch", response_model=BatchResponse)
def run_batch(specs: List[CommandSpec], service: TaskService = Depends(get_task_service)):
    try:
        results = service.run_batch([spec.model_dump() for spec in specs])
    except (CommandError, UnknownTaskTypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Batch of %d commands executed", len(specs))
    return BatchResponse(results=[_serialize(result) for result in results])


@router.post("/undo", response_model=HistoryState)
def undo(service: TaskService = Depends(get_task_service)):
    return _state(service, service.undo())


@router.post("/redo", response_model=HistoryState)
def redo(service: TaskService = Depends(get_task_service)):
    return _state(service, service.redo())
