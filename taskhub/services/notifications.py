from __future__ import annotations

import logging
from typing import Protocol

from taskhub.domain.entities import utcnow
from taskhub.domain.tasks import DisplayTask
from taskhub.infra.log_adapters import AppLogger, ConsoleLoggerAdapter

logger = logging.getLogger(__name__)


class Subscriber(Protocol):
    def update(self, task: DisplayTask) -> None: ...


class TaskObserver:
    """Synchronous fan-out of task events to subscribers, in subscription order."""

    def __init__(self, subscribers: list[Subscriber] | None = None) -> None:
        self._subscribers: list[Subscriber] = list(subscribers or [])

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def notify(self, task: DisplayTask) -> None:
        logger.debug("Notifying %d subscribers about %r", len(self._subscribers), task.title)
        for subscriber in list(self._subscribers):
            subscriber.update(task)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class ConsoleSubscriber:
    def __init__(self, sink: AppLogger | None = None) -> None:
        self._sink = sink or ConsoleLoggerAdapter()

    def update(self, task: DisplayTask) -> None:
        self._sink.log(f"Task notification: {task.title}")


class EmailSubscriber:
    def __init__(self, email: str, sink: AppLogger | None = None) -> None:
        self.email = email
        self._sink = sink or ConsoleLoggerAdapter()

    def update(self, task: DisplayTask) -> None:
        self._sink.log(f'Email sent to {self.email}: New task "{task.title}" has been created')


class AuditLogSubscriber:
    def __init__(self, sink: AppLogger | None = None) -> None:
        self._sink = sink or ConsoleLoggerAdapter()
        self.entries: list[str] = []

    def update(self, task: DisplayTask) -> None:
        entry = f'[{utcnow().isoformat()}] Task "{task.title}" created'
        self.entries.append(entry)
        self._sink.log(f"Audit log entry {entry}")
