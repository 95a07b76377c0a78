from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskhub.config import SETTINGS, Settings
from taskhub.infra.repository import TaskRepository, build_repository
from taskhub.services.invoker import InvokerRegistry
from taskhub.services.notifications import AuditLogSubscriber, ConsoleSubscriber, TaskObserver

from .routes import router as tasks_router

logger = logging.getLogger(__name__)


def build_observer() -> TaskObserver:
    return TaskObserver([ConsoleSubscriber(), AuditLogSubscriber()])


def create_app(
    settings: Settings = SETTINGS,
    repository: TaskRepository | None = None,
    observer: TaskObserver | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Task Hub API starting (%s store)", settings.store_backend)
        yield
        logger.info("Task Hub API shutting down")

    app = FastAPI(
        title="Task Hub API",
        description="Task CRUD with undo/redo history",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.repository = repository if repository is not None else build_repository(settings)
    app.state.observer = observer if observer is not None else build_observer()
    app.state.invokers = InvokerRegistry(settings.max_sessions)

    @app.get("/")
    async def root():
        return {
            "message": "Task Hub API",
            "endpoints": {
                "tasks": "/api/tasks",
                "batch": "/api/tasks/batch",
                "undo": "/api/tasks/undo",
                "redo": "/api/tasks/redo",
                "history": "/api/tasks/history",
            },
        }

    app.include_router(tasks_router)
    return app
