from __future__ import annotations

import logging
from typing import Any, Optional

from taskhub.domain.decorators import DecoratedTask, build_decorated_task
from taskhub.domain.entities import TaskRecord
from taskhub.domain.enums import CommandType, Priority
from taskhub.infra.repository import TaskRepository

from .command_factory import CommandFactory
from .commands import Command, MacroCommand
from .invoker import TaskCommandInvoker
from .notifications import TaskObserver

logger = logging.getLogger(__name__)


class TaskService:
    """Runs task mutations as commands so a session can undo and redo them."""

    def __init__(
        self,
        repo: TaskRepository,
        observer: TaskObserver,
        invoker: TaskCommandInvoker | None = None,
        strict_types: bool = False,
    ) -> None:
        self._repo = repo
        self._observer = observer
        self._invoker = invoker or TaskCommandInvoker()
        self._strict_types = strict_types

    @property
    def invoker(self) -> TaskCommandInvoker:
        return self._invoker

    def list_tasks(self) -> list[TaskRecord]:
        return self._repo.find_all()

    def get_task(self, task_id: str) -> Optional[TaskRecord]:
        return self._repo.find_by_id(task_id)

    def describe_task(self, task_id: str) -> Optional[DecoratedTask]:
        """Display view of a stored task; unknown priorities are left undecorated."""
        task = self._repo.find_by_id(task_id)
        if not task:
            return None
        priority = task.priority if task.priority in {p.value for p in Priority} else None
        return build_decorated_task(task.title, priority=priority)

    def create_task(self, data: dict[str, Any]) -> TaskRecord:
        command = self._build(CommandType.CREATE, data)
        return self._invoker.execute(command)

    def update_task(self, task_id: str, updates: dict[str, Any]) -> Optional[TaskRecord]:
        if self._repo.find_by_id(task_id) is None:
            return None
        command = self._build(CommandType.UPDATE, {"task_id": task_id, "updates": updates})
        return self._invoker.execute(command)

    def delete_task(self, task_id: str) -> bool:
        if self._repo.find_by_id(task_id) is None:
            return False
        command = self._build(CommandType.DELETE, {"task_id": task_id})
        return self._invoker.execute(command)

    def run_batch(self, specs: list[dict[str, Any]]) -> list[Any]:
        commands = CommandFactory.create_batch_command(
            specs, self._repo, self._observer, strict_types=self._strict_types
        )
        logger.info("Running batch of %d commands", len(commands))
        return self._invoker.execute(MacroCommand(commands))

    def undo(self) -> bool:
        return self._invoker.undo()

    def redo(self) -> bool:
        return self._invoker.redo()

    def history(self) -> list[str]:
        return self._invoker.get_history()

    def _build(self, command_type: CommandType, params: dict[str, Any]) -> Command:
        return CommandFactory.create_command(
            command_type,
            params,
            self._repo,
            self._observer,
            strict_types=self._strict_types,
        )
