from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional

from tasklist.domain.dates import DateInput, parse_due_date
from tasklist.domain.entities import TaskEntity
from tasklist.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def _new_task_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """Sole owner of the session's tasks, kept in insertion order."""

    def __init__(self) -> None:
        self._tasks: list[TaskEntity] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[TaskEntity]:
        return list(self._tasks)

    def get_task(self, task_id: str) -> Optional[TaskEntity]:
        return next((task for task in self._tasks if task.id == task_id), None)

    def add(self, title: str, description: str = "", due_date: DateInput = None) -> TaskEntity:
        clean_title = (title or "").strip()
        if not clean_title:
            raise ValidationError("Please enter a task title before adding!")
        clean_due_date = parse_due_date(due_date)

        task = TaskEntity(
            id=_new_task_id(),
            title=clean_title,
            description=(description or "").strip(),
            due_date=clean_due_date,
            completed=False,
        )
        self._tasks.append(task)
        logger.info("Task created id=%s due=%s", task.id, task.due_date_iso)
        return task

    def toggle_complete(self, task_id: str) -> Optional[TaskEntity]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = replace(task, completed=not task.completed)
                self._tasks[index] = updated
                logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
                return updated
        logger.debug("Toggle ignored, unknown task id=%s", task_id)
        return None

    def delete(self, task_id: str) -> None:
        remaining = [task for task in self._tasks if task.id != task_id]
        if len(remaining) == len(self._tasks):
            logger.debug("Delete ignored, unknown task id=%s", task_id)
            return
        self._tasks = remaining
        logger.info("Task deleted id=%s", task_id)
