from __future__ import annotations

from datetime import timezone
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from taskhub.domain.entities import TaskRecord, clean_patch, utcnow

from .models import TaskModel


def _to_record(model: TaskModel) -> TaskRecord:
    created_at = model.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return TaskRecord(
        id=str(model.id),
        title=model.title,
        type=model.type,
        description=model.description,
        priority=model.priority,
        completed=model.completed,
        created_at=created_at,
    )


def _parse_id(task_id: str) -> Optional[int]:
    return int(task_id) if str(task_id).isdigit() else None


class SqlTaskRepository:
    """Task store backed by a SQLAlchemy session factory.

    Ids are integer primary keys exposed as strings, so records look the same
    as those of the in-memory store.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def save(self, data: dict[str, Any]) -> TaskRecord:
        fields = clean_patch(data)
        fields["completed"] = False
        with self._session_factory() as session:
            task = TaskModel(**fields, created_at=utcnow())
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_record(task)

    def restore(self, record: TaskRecord) -> TaskRecord:
        with self._session_factory() as session:
            task = TaskModel(
                id=int(record.id),
                title=record.title,
                type=record.type,
                description=record.description,
                priority=record.priority,
                completed=record.completed,
                created_at=record.created_at,
            )
            session.merge(task)
            session.commit()
        return record

    def find_by_id(self, task_id: str) -> Optional[TaskRecord]:
        pk = _parse_id(task_id)
        if pk is None:
            return None
        with self._session_factory() as session:
            task = session.get(TaskModel, pk)
            return _to_record(task) if task else None

    def find_all(self) -> list[TaskRecord]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.id.asc())
            return [_to_record(task) for task in session.scalars(stmt)]

    def update(self, task_id: str, patch: dict[str, Any]) -> Optional[TaskRecord]:
        pk = _parse_id(task_id)
        if pk is None:
            return None
        with self._session_factory() as session:
            task = session.get(TaskModel, pk)
            if not task:
                return None
            for key, value in clean_patch(patch).items():
                setattr(task, key, value)
            session.commit()
            session.refresh(task)
            return _to_record(task)

    def delete(self, task_id: str) -> bool:
        pk = _parse_id(task_id)
        if pk is None:
            return False
        with self._session_factory() as session:
            task = session.get(TaskModel, pk)
            if not task:
                return False
            session.delete(task)
            session.commit()
            return True

    def clear(self) -> None:
        with self._session_factory() as session:
            session.execute(delete(TaskModel))
            session.commit()
