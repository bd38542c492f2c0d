from __future__ import annotations

import logging

from tasklist.config import SETTINGS
from tasklist.domain.dates import DateInput
from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import TaskFilter
from tasklist.domain.errors import ValidationError
from tasklist.domain.filters import derive_visible, empty_state_message, parse_filter
from tasklist.infra.store import TaskStore
from tasklist.services.task_form import TaskForm

logger = logging.getLogger(__name__)


def _initial_filter(value: TaskFilter | str | None) -> TaskFilter:
    if value is None:
        value = SETTINGS.default_filter
    try:
        return parse_filter(value)
    except ValidationError:
        logger.warning("Ignoring unknown default filter %r", value)
        return TaskFilter.ALL


class TaskService:
    def __init__(self, store: TaskStore | None = None, filter_key: TaskFilter | str | None = None) -> None:
        self._store = store if store is not None else TaskStore()
        self._filter = _initial_filter(filter_key)
        self.form = TaskForm(self.add)

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    def add(self, title: str, description: str = "", due_date: DateInput = None) -> TaskEntity:
        return self._store.add(title, description, due_date)

    def toggle_complete(self, task_id: str) -> None:
        self._store.toggle_complete(task_id)

    def delete(self, task_id: str) -> None:
        self._store.delete(task_id)

    def set_filter(self, value: TaskFilter | str) -> None:
        self._filter = parse_filter(value)
        logger.debug("Filter set to %s", self._filter.value)

    def list_tasks(self) -> list[TaskEntity]:
        return self._store.list_tasks()

    def get_visible_tasks(self) -> list[TaskEntity]:
        return derive_visible(self._store.list_tasks(), self._filter)

    def get_empty_message(self) -> str | None:
        return empty_state_message(self._filter, self.get_visible_tasks())

    def get_stats(self) -> dict[str, int]:
        tasks = self._store.list_tasks()
        completed = sum(1 for task in tasks if task.completed)
        return {
            "total": len(tasks),
            "active": len(tasks) - completed,
            "completed": completed,
        }
