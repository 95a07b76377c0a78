from __future__ import annotations

from enum import StrEnum


class TaskType(StrEnum):
    SIMPLE = "simple"
    COMPLEX = "complex"


class Priority(StrEnum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class CommandType(StrEnum):
    CREATE = "create"
    DELETE = "delete"
    UPDATE = "update"
