from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

from .commands import Command, supports_undo

logger = logging.getLogger(__name__)


class TaskCommandInvoker:
    """Executes commands and keeps a linear undo/redo history.

    ``_index`` points at the last applied command, -1 when nothing is
    applied. Executing after an undo drops every command past ``_index``.
    """

    def __init__(self) -> None:
        self._history: list[Command] = []
        self._index = -1

    def execute(self, command: Command) -> Any:
        del self._history[self._index + 1:]
        result = command.execute()
        self._history.append(command)
        self._index += 1
        return result

    def undo(self) -> bool:
        if self._index < 0:
            return False
        command = self._history[self._index]
        if not supports_undo(command):
            logger.debug("%s does not support undo", type(command).__name__)
            return False
        command.undo()
        self._index -= 1
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False
        self._index += 1
        self._history[self._index].execute()
        return True

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1

    def get_history(self) -> list[str]:
        lines = []
        for index, command in enumerate(self._history):
            marker = " <- current" if index == self._index else ""
            lines.append(f"{index}: {type(command).__name__}{marker}")
        return lines

    def clear_history(self) -> None:
        self._history = []
        self._index = -1


class InvokerRegistry:
    """Per-session invokers, dropping the least recently used past ``max_sessions``."""

    def __init__(self, max_sessions: int = 256) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._max_sessions = max_sessions
        self._invokers: OrderedDict[str, TaskCommandInvoker] = OrderedDict()

    def get(self, session_id: str) -> TaskCommandInvoker:
        invoker = self._invokers.get(session_id)
        if invoker is None:
            invoker = self._invokers[session_id] = TaskCommandInvoker()
        self._invokers.move_to_end(session_id)
        while len(self._invokers) > self._max_sessions:
            evicted, _ = self._invokers.popitem(last=False)
            logger.info("Dropping undo history of idle session %s", evicted)
        return invoker

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._invokers

    def __len__(self) -> int:
        return len(self._invokers)
