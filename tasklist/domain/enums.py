from __future__ import annotations

from enum import StrEnum


class TaskFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class FormState(StrEnum):
    CLOSED = "closed"
    EDITING = "editing"
