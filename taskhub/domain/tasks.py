"""Display tasks handed to observers, built by the type-keyed task factory."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .enums import TaskType

logger = logging.getLogger(__name__)


class UnknownTaskTypeError(ValueError):
    pass


@runtime_checkable
class DisplayTask(Protocol):
    @property
    def title(self) -> str: ...


class SimpleTask:
    def __init__(self, title: str) -> None:
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._title!r})"


class ComplexTask(SimpleTask):
    @property
    def title(self) -> str:
        return f"[Complex] {self._title}"


_TASK_TYPES: dict[str, type[SimpleTask]] = {
    TaskType.SIMPLE.value: SimpleTask,
    TaskType.COMPLEX.value: ComplexTask,
}


class TaskFactory:
    @staticmethod
    def create_task(task_type: str, title: str, strict: bool = False) -> DisplayTask:
        """Build the display form of a task.

        Unknown types fall back to a plain ``SimpleTask`` unless ``strict``
        is set, in which case ``UnknownTaskTypeError`` is raised.
        """
        task_cls = _TASK_TYPES.get(str(task_type))
        if task_cls is None:
            if strict:
                raise UnknownTaskTypeError(f"Unknown task type: {task_type}")
            logger.warning("Unknown task type %r, using simple task", task_type)
            task_cls = SimpleTask
        return task_cls(title)
