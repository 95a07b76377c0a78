from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Protocol

from taskhub.config import Settings
from taskhub.domain.entities import TaskRecord, clean_patch, utcnow

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    def save(self, data: dict[str, Any]) -> TaskRecord: ...

    def restore(self, record: TaskRecord) -> TaskRecord: ...

    def find_by_id(self, task_id: str) -> Optional[TaskRecord]: ...

    def find_all(self) -> list[TaskRecord]: ...

    def update(self, task_id: str, patch: dict[str, Any]) -> Optional[TaskRecord]: ...

    def delete(self, task_id: str) -> bool: ...

    def clear(self) -> None: ...


class InMemoryTaskRepository:
    def __init__(self) -> None:
        self._tasks: dict[str, TaskRecord] = {}
        self._next_id = 1

    def save(self, data: dict[str, Any]) -> TaskRecord:
        fields = clean_patch(data)
        fields.pop("completed", None)
        record = TaskRecord(
            id=str(self._next_id),
            title=fields.pop("title"),
            type=fields.pop("type"),
            created_at=utcnow(),
            completed=False,
            **fields,
        )
        self._next_id += 1
        self._tasks[record.id] = record
        return record

    def restore(self, record: TaskRecord) -> TaskRecord:
        if record.id.isdigit():
            self._next_id = max(self._next_id, int(record.id) + 1)
        self._tasks[record.id] = record
        return record

    def find_by_id(self, task_id: str) -> Optional[TaskRecord]:
        return self._tasks.get(task_id)

    def find_all(self) -> list[TaskRecord]:
        return list(self._tasks.values())

    def update(self, task_id: str, patch: dict[str, Any]) -> Optional[TaskRecord]:
        task = self._tasks.get(task_id)
        if not task:
            return None
        ignored = set(patch) - set(clean_patch(patch))
        if ignored:
            logger.debug("Ignoring non-patchable fields %s for task %s", sorted(ignored), task_id)
        updated = replace(task, **clean_patch(patch))
        self._tasks[task_id] = updated
        return updated

    def delete(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def clear(self) -> None:
        self._tasks.clear()
        self._next_id = 1


def build_repository(settings: Settings) -> TaskRepository:
    """Construct the store selected by ``settings.store_backend``."""
    if settings.store_backend == "database":
        from .db import build_engine, build_session_factory, init_db
        from .sql_repository import SqlTaskRepository

        engine = build_engine(settings.database_url)
        init_db(engine)
        logger.info("Using database task store")
        return SqlTaskRepository(build_session_factory(engine))
    logger.info("Using in-memory task store")
    return InMemoryTaskRepository()
