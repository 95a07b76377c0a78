"""Reversible task mutations.

Each command captures just enough state during ``execute`` to reverse itself
in ``undo``. Commands without an ``undo`` method are valid; use
``supports_undo`` rather than assuming the capability.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from taskhub.domain.entities import TaskRecord
from taskhub.domain.tasks import TaskFactory
from taskhub.infra.repository import TaskRepository

from .notifications import TaskObserver

logger = logging.getLogger(__name__)


class Command(Protocol):
    def execute(self) -> Any: ...


def supports_undo(command: Command) -> bool:
    return callable(getattr(command, "undo", None))


class CreateTaskCommand:
    def __init__(
        self,
        title: str,
        task_type: str,
        repository: TaskRepository,
        observer: TaskObserver,
        description: str | None = None,
        priority: str | None = None,
        strict_types: bool = False,
    ) -> None:
        self.title = title
        self.task_type = task_type
        self.description = description
        self.priority = priority
        self._repo = repository
        self._observer = observer
        self._strict_types = strict_types
        self.created_task_id: Optional[str] = None

    def execute(self) -> TaskRecord:
        task = TaskFactory.create_task(self.task_type, self.title, strict=self._strict_types)
        data: dict[str, Any] = {"title": self.title, "type": self.task_type}
        if self.description is not None:
            data["description"] = self.description
        if self.priority is not None:
            data["priority"] = self.priority
        saved = self._repo.save(data)
        self.created_task_id = saved.id
        logger.info("Task %s created", saved.id)
        self._observer.notify(task)
        return saved

    def undo(self) -> None:
        if self.created_task_id:
            self._repo.delete(self.created_task_id)
            logger.info("Undoing task creation: %s", self.created_task_id)


class DeleteTaskCommand:
    def __init__(self, task_id: str, repository: TaskRepository) -> None:
        self.task_id = task_id
        self._repo = repository
        self.deleted_task: Optional[TaskRecord] = None

    def execute(self) -> bool:
        self.deleted_task = self._repo.find_by_id(self.task_id)
        result = self._repo.delete(self.task_id)
        if result:
            logger.info("Task %s deleted", self.task_id)
        return result

    def undo(self) -> None:
        if self.deleted_task:
            self._repo.restore(self.deleted_task)
            logger.info("Undoing task deletion: %s", self.task_id)


class UpdateTaskCommand:
    def __init__(self, task_id: str, updates: dict[str, Any], repository: TaskRepository) -> None:
        self.task_id = task_id
        self.updates = dict(updates)
        self._repo = repository
        self.previous_state: Optional[TaskRecord] = None

    def execute(self) -> Optional[TaskRecord]:
        self.previous_state = self._repo.find_by_id(self.task_id)
        result = self._repo.update(self.task_id, self.updates)
        if result:
            logger.info("Task %s updated", self.task_id)
        return result

    def undo(self) -> None:
        if self.previous_state:
            self._repo.update(self.task_id, self.previous_state.to_patch())
            logger.info("Undoing task update: %s", self.task_id)


class MacroCommand:
    """Runs child commands in order and undoes them in reverse order.

    A failing child is not caught: commands that already ran stay applied and
    the error reaches the caller.
    """

    def __init__(self, commands: list[Command] | None = None) -> None:
        self._commands: list[Command] = list(commands or [])

    def execute(self) -> list[Any]:
        results: list[Any] = []
        for command in self._commands:
            results.append(command.execute())
        return results

    def undo(self) -> None:
        for command in reversed(self._commands):
            if supports_undo(command):
                command.undo()

    def add_command(self, command: Command) -> None:
        self._commands.append(command)

    def clear(self) -> None:
        self._commands = []

    def __len__(self) -> int:
        return len(self._commands)
