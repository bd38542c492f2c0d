from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from .entities import TaskEntity
from .enums import TaskFilter
from .errors import ValidationError

EMPTY_MESSAGES: dict[TaskFilter, str] = {
    TaskFilter.ALL: "No tasks yet. Add a new task to get started!",
    TaskFilter.ACTIVE: "No active tasks!",
    TaskFilter.COMPLETED: "No completed tasks!",
}


def parse_filter(value: TaskFilter | str) -> TaskFilter:
    if isinstance(value, TaskFilter):
        return value
    try:
        return TaskFilter(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(item.value for item in TaskFilter)
        raise ValidationError(f"Unknown filter {value!r}. Expected one of: {allowed}.") from None


def _matches(task: TaskEntity, filter_key: TaskFilter) -> bool:
    if filter_key == TaskFilter.ACTIVE:
        return not task.completed
    if filter_key == TaskFilter.COMPLETED:
        return task.completed
    return True


def _due_date_key(task: TaskEntity) -> tuple[bool, date]:
    # Undated tasks go last; sorted() is stable so ties keep input order.
    if task.due_date is None:
        return (True, date.max)
    return (False, task.due_date)


def derive_visible(tasks: Iterable[TaskEntity], filter_key: TaskFilter | str) -> list[TaskEntity]:
    """Return the filtered, due-date ordered projection of ``tasks``.

    The input is only read; a new list is always returned.
    """
    selected = parse_filter(filter_key)
    subset = [task for task in tasks if _matches(task, selected)]
    return sorted(subset, key=_due_date_key)


def empty_state_message(
    filter_key: TaskFilter | str,
    visible: Sequence[TaskEntity],
) -> str | None:
    if visible:
        return None
    return EMPTY_MESSAGES[parse_filter(filter_key)]
