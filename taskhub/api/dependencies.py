from __future__ import annotations

from fastapi import Header, Request

from taskhub.infra.repository import TaskRepository
from taskhub.services.invoker import InvokerRegistry, TaskCommandInvoker
from taskhub.services.task_service import TaskService

DEFAULT_SESSION = "default"


def get_repository(request: Request) -> TaskRepository:
    return request.app.state.repository


def get_invoker(
    request: Request,
    x_session_id: str = Header(DEFAULT_SESSION),
) -> TaskCommandInvoker:
    """One invoker per session, so undo never crosses sessions."""
    invokers: InvokerRegistry = request.app.state.invokers
    return invokers.get(x_session_id or DEFAULT_SESSION)


def get_task_service(request: Request, x_session_id: str = Header(DEFAULT_SESSION)) -> TaskService:
    state = request.app.state
    return TaskService(
        state.repository,
        state.observer,
        invoker=get_invoker(request, x_session_id),
        strict_types=state.settings.strict_task_types,
    )
