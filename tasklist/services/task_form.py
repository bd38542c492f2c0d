from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Optional

from tasklist.domain.dates import DateInput, format_due_date, parse_due_date
from tasklist.domain.entities import TaskEntity
from tasklist.domain.enums import FormState
from tasklist.domain.errors import ValidationError

logger = logging.getLogger(__name__)

DATE_PLACEHOLDER = "Select due date (optional)"

AddTask = Callable[[str, str, Optional[date]], TaskEntity]


@dataclass
class TaskDraft:
    title: str = ""
    description: str = ""
    due_date: Optional[date] = None


class TaskForm:
    """Draft state and open/cancel/submit transitions of the "add task" dialog.

    ``submit`` and ``set_due_date`` never let a :class:`ValidationError` escape:
    the warning is kept in ``warning`` and the form stays in ``editing`` so the
    user can fix it.
    """

    def __init__(self, add_task: AddTask) -> None:
        self._add_task = add_task
        self.state = FormState.CLOSED
        self.draft = TaskDraft()
        self.warning: str | None = None

    @property
    def is_open(self) -> bool:
        return self.state == FormState.EDITING

    @property
    def due_date_label(self) -> str:
        if self.draft.due_date is None:
            return DATE_PLACEHOLDER
        return format_due_date(self.draft.due_date)

    def open(self) -> None:
        if self.is_open:
            return
        self._reset()
        self.state = FormState.EDITING

    def set_title(self, text: str) -> None:
        self._require_open()
        self.draft.title = text

    def set_description(self, text: str) -> None:
        self._require_open()
        self.draft.description = text

    def set_due_date(self, value: DateInput) -> None:
        self._require_open()
        try:
            due_date = parse_due_date(value)
        except ValidationError as exc:
            logger.warning("Due date not set: %s", exc.message)
            self.warning = exc.message
            return
        self.draft.due_date = due_date
        self.warning = None

    def clear_due_date(self) -> None:
        self._require_open()
        self.draft.due_date = None

    def cancel(self) -> None:
        self._require_open()
        self._reset()
        self.state = FormState.CLOSED

    def submit(self) -> TaskEntity | None:
        self._require_open()
        try:
            task = self._add_task(self.draft.title, self.draft.description, self.draft.due_date)
        except ValidationError as exc:
            logger.warning("Task not created: %s", exc.message)
            self.warning = exc.message
            return None
        self._reset()
        self.state = FormState.CLOSED
        return task

    def _reset(self) -> None:
        self.draft = TaskDraft()
        self.warning = None

    def _require_open(self) -> None:
        if not self.is_open:
            raise RuntimeError("Task form is closed; call open() first.")
