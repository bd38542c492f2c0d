from __future__ import annotations

from datetime import date

import pytest

from tasklist.domain.enums import TaskFilter
from tasklist.domain.errors import ValidationError
from tasklist.infra.store import TaskStore
from tasklist.services.task_service import TaskService


def _titles(tasks) -> list[str]:
    return [task.title for task in tasks]


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_add_rejects_blank_title(title: str) -> None:
    service = TaskService(filter_key=TaskFilter.ALL)
    service.add("Existing")

    with pytest.raises(ValidationError):
        service.add(title, "details", "2024-01-05")

    assert _titles(service.list_tasks()) == ["Existing"]


def test_add_then_list_all() -> None:
    service = TaskService(filter_key="all")

    service.add("Buy milk", "", None)

    visible = service.get_visible_tasks()
    assert len(visible) == 1
    assert visible[0].title == "Buy milk"
    assert visible[0].completed is False
    assert visible[0].due_date is None


def test_add_trims_and_parses_iso_date() -> None:
    service = TaskService(filter_key="all")

    task = service.add("  Pay rent ", "  landlord  ", "2024-02-01T09:30:00.000Z")

    assert task.title == "Pay rent"
    assert task.description == "landlord"
    assert task.due_date == date(2024, 2, 1)
    assert task.to_dict()["due_date"] == "2024-02-01"


def test_add_accepts_past_dates() -> None:
    service = TaskService(filter_key="all")

    task = service.add("Old", due_date=date(1999, 12, 31))

    assert task.due_date == date(1999, 12, 31)


def test_add_rejects_bad_date_without_mutation() -> None:
    service = TaskService(filter_key="all")

    with pytest.raises(ValidationError):
        service.add("Dentist", due_date="next tuesday")

    assert service.list_tasks() == []


def test_ids_are_unique() -> None:
    service = TaskService(filter_key="all")

    ids = {service.add(f"Task {i}").id for i in range(200)}

    assert len(ids) == 200


def test_toggle_twice_restores_state() -> None:
    service = TaskService(filter_key="all")
    task = service.add("Walk dog", "around the block", "2024-03-01")

    service.toggle_complete(task.id)
    toggled = service.list_tasks()[0]
    assert toggled.completed is True
    assert (toggled.id, toggled.title, toggled.description, toggled.due_date) == (
        task.id,
        task.title,
        task.description,
        task.due_date,
    )

    service.toggle_complete(task.id)
    assert service.list_tasks()[0] == task


def test_toggle_keeps_position() -> None:
    service = TaskService(filter_key="all")
    first = service.add("First")
    service.add("Second")
    service.add("Third")

    service.toggle_complete(first.id)

    assert _titles(service.list_tasks()) == ["First", "Second", "Third"]


def test_toggle_unknown_id_is_noop() -> None:
    service = TaskService(filter_key="all")
    task = service.add("Only")

    service.toggle_complete("missing")

    assert service.list_tasks() == [task]


def test_delete_removes_task() -> None:
    service = TaskService(filter_key="all")
    keep = service.add("Keep")
    drop = service.add("Drop")

    service.delete(drop.id)

    assert service.list_tasks() == [keep]


def test_delete_unknown_id_is_noop() -> None:
    service = TaskService(filter_key="all")
    service.add("A", "one", "2024-01-01")
    service.add("B")
    before = service.list_tasks()

    service.delete("missing")

    assert service.list_tasks() == before


def test_filtered_views() -> None:
    service = TaskService(filter_key="all")
    first = service.add("First", due_date="2024-05-01")
    service.add("Second")
    third = service.add("Third", due_date="2024-04-01")
    service.toggle_complete(first.id)
    service.toggle_complete(third.id)

    service.set_filter("active")
    assert _titles(service.get_visible_tasks()) == ["Second"]

    service.set_filter(TaskFilter.COMPLETED)
    assert _titles(service.get_visible_tasks()) == ["Third", "First"]


def test_set_filter_rejects_unknown_value() -> None:
    service = TaskService(filter_key="active")

    with pytest.raises(ValidationError):
        service.set_filter("overdue")

    assert service.filter == TaskFilter.ACTIVE


def test_unknown_default_filter_falls_back_to_all() -> None:
    service = TaskService(filter_key="someday")

    assert service.filter == TaskFilter.ALL


@pytest.mark.parametrize("filter_key", list(TaskFilter))
def test_empty_message_tracks_visible_tasks(filter_key: TaskFilter) -> None:
    service = TaskService(filter_key=filter_key)
    assert service.get_empty_message() is not None

    task = service.add("Something")
    assert (service.get_empty_message() is None) == bool(service.get_visible_tasks())

    service.toggle_complete(task.id)
    assert (service.get_empty_message() is None) == bool(service.get_visible_tasks())


def test_empty_message_text_per_filter() -> None:
    service = TaskService(filter_key="all")
    service.toggle_complete(service.add("Done already").id)

    assert service.get_empty_message() is None
    service.set_filter("active")
    assert service.get_empty_message() == "No active tasks!"


def test_viewing_does_not_reorder_store() -> None:
    store = TaskStore()
    service = TaskService(store, filter_key="all")
    service.add("Late", due_date="2024-12-31")
    service.add("Early", due_date="2024-01-01")

    assert _titles(service.get_visible_tasks()) == ["Early", "Late"]
    assert _titles(store.list_tasks()) == ["Late", "Early"]


def test_stats() -> None:
    service = TaskService(filter_key="all")
    service.add("One")
    service.toggle_complete(service.add("Two").id)

    assert service.get_stats() == {"total": 2, "active": 1, "completed": 1}
