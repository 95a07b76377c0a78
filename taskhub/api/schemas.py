from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    title: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    type: str
    description: Optional[str]
    priority: Optional[str]
    completed: bool
    created_at: datetime


class CommandSpec(BaseModel):
    type: str
    params: dict[str, Any] = Field(default_factory=dict)


class BatchResponse(BaseModel):
    results: List[Any]


class HistoryState(BaseModel):
    success: bool
    can_undo: bool
    can_redo: bool


class HistoryResponse(BaseModel):
    history: List[str]
    can_undo: bool
    can_redo: bool


class TaskDisplay(BaseModel):
    id: str
    title: str
    description: str
    priority: str
