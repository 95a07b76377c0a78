"""Composable display wrappers for tasks.

Every wrapper exposes the same surface as the task it wraps, so wrappers can
be stacked in any order. ``build_decorated_task`` applies them in a fixed
order: priority, deadline, notifications, logging.
"""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Optional, Protocol

from .enums import Priority

logger = logging.getLogger(__name__)

PRIORITY_MARKERS = {
    Priority.URGENT: "🚨",
    Priority.HIGH: "⚡",
    Priority.LOW: "📌",
    Priority.NORMAL: "",
}

_DAY_SECONDS = 24 * 60 * 60


class DecoratedTask(Protocol):
    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def priority(self) -> str: ...

    @property
    def deadline(self) -> Optional[datetime]: ...

    def execute(self) -> None: ...


class BaseTask:
    def __init__(self, title: str) -> None:
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return "Basic task"

    @property
    def priority(self) -> str:
        return Priority.NORMAL.value

    @property
    def deadline(self) -> Optional[datetime]:
        return None

    def execute(self) -> None:
        logger.info("Executing task: %s", self._title)


class TaskDecorator:
    def __init__(self, task: DecoratedTask) -> None:
        self._task = task

    @property
    def title(self) -> str:
        return self._task.title

    @property
    def description(self) -> str:
        return self._task.description

    @property
    def priority(self) -> str:
        return self._task.priority

    @property
    def deadline(self) -> Optional[datetime]:
        return self._task.deadline

    def execute(self) -> None:
        self._task.execute()


class PriorityDecorator(TaskDecorator):
    def __init__(self, task: DecoratedTask, priority: Priority | str) -> None:
        super().__init__(task)
        self._priority = Priority(priority)

    @property
    def priority(self) -> str:
        return self._priority.value

    @property
    def title(self) -> str:
        return f"{PRIORITY_MARKERS[self._priority]} {super().title}"

    def execute(self) -> None:
        if self._priority is Priority.URGENT:
            logger.warning("URGENT task execution: %s", self._task.title)
        super().execute()


class DeadlineDecorator(TaskDecorator):
    def __init__(self, task: DecoratedTask, deadline: datetime) -> None:
        super().__init__(task)
        if deadline.tzinfo is None:
            deadline = deadline.replace(tzinfo=timezone.utc)
        self._deadline = deadline

    @property
    def deadline(self) -> Optional[datetime]:
        return self._deadline

    def seconds_left(self, now: datetime | None = None) -> float:
        now = now or datetime.now(timezone.utc)
        return (self._deadline - now).total_seconds()

    @property
    def description(self) -> str:
        days_left = math.ceil(self.seconds_left() / _DAY_SECONDS)
        return (
            f"{super().description} - Due in {days_left} days "
            f"({self._deadline:%a %b %d %Y})"
        )

    def execute(self) -> None:
        remaining = self.seconds_left()
        if remaining < 0:
            logger.warning("Task is overdue: %s", self.title)
        elif remaining < _DAY_SECONDS:
            logger.warning("Task is due today: %s", self.title)
        super().execute()


class NotificationDecorator(TaskDecorator):
    def __init__(self, task: DecoratedTask, notify_before_hours: int = 24) -> None:
        super().__init__(task)
        self.notify_before_hours = notify_before_hours

    @property
    def description(self) -> str:
        return f"{super().description} - With notifications enabled"

    def execute(self) -> None:
        logger.info("Sending notification for task: %s", self.title)
        super().execute()
        logger.info("Task completed and stakeholders notified: %s", self.title)


class LoggingDecorator(TaskDecorator):
    def execute(self) -> None:
        logger.info("Starting execution of task: %s", self.title)
        logger.info("Priority: %s", self.priority)
        logger.info("Description: %s", self.description)
        started = time.perf_counter()
        super().execute()
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Task completed in %.1fms", elapsed_ms)


def build_decorated_task(
    title: str,
    priority: Priority | str | None = None,
    deadline: datetime | None = None,
    notifications: bool = False,
    with_logging: bool = False,
) -> DecoratedTask:
    task: DecoratedTask = BaseTask(title)
    if priority:
        task = PriorityDecorator(task, priority)
    if deadline:
        task = DeadlineDecorator(task, deadline)
    if notifications:
        task = NotificationDecorator(task)
    if with_logging:
        task = LoggingDecorator(task)
    return task
