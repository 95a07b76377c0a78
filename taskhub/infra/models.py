from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from taskhub.domain.entities import utcnow

from .db import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(String(20), nullable=True)
    type = Column(String(50), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
