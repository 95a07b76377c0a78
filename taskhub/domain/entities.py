from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

PATCHABLE_FIELDS = ("title", "description", "priority", "type", "completed")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TaskRecord:
    id: str
    title: str
    type: str
    description: Optional[str] = None
    priority: Optional[str] = None
    completed: bool = False
    created_at: datetime = field(default_factory=utcnow)

    def to_patch(self) -> dict[str, Any]:
        """Patchable fields of this record, usable as an update payload."""
        data = asdict(self)
        return {key: data[key] for key in PATCHABLE_FIELDS}


def clean_patch(patch: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in patch.items() if key in PATCHABLE_FIELDS}
