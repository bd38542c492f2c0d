from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class TaskEntity:
    id: str
    title: str
    description: str
    due_date: Optional[date]
    completed: bool = False

    @property
    def due_date_iso(self) -> str | None:
        return self.due_date.isoformat() if self.due_date else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date_iso,
            "completed": self.completed,
        }
