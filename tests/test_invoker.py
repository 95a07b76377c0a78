from __future__ import annotations

import pytest

from taskhub.infra.repository import InMemoryTaskRepository
from taskhub.services.commands import CreateTaskCommand, DeleteTaskCommand, UpdateTaskCommand
from taskhub.services.invoker import InvokerRegistry, TaskCommandInvoker
from taskhub.services.notifications import TaskObserver


class QueryOnly:
    def execute(self) -> str:
        return "query"


@pytest.fixture
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def observer() -> TaskObserver:
    return TaskObserver()


@pytest.fixture
def invoker() -> TaskCommandInvoker:
    return TaskCommandInvoker()


def _snapshot(repo: InMemoryTaskRepository) -> dict:
    return {task.id: task for task in repo.find_all()}


def _content(repo: InMemoryTaskRepository) -> list[tuple]:
    return [(t.title, t.type, t.description, t.priority, t.completed) for t in repo.find_all()]


def test_empty_history_cannot_undo_or_redo(invoker) -> None:
    assert invoker.undo() is False
    assert invoker.can_undo() is False
    assert invoker.redo() is False
    assert invoker.can_redo() is False
    assert invoker.get_history() == []


def test_execute_returns_command_result(repo, observer, invoker) -> None:
    task = invoker.execute(CreateTaskCommand("Buy milk", "simple", repo, observer))

    assert task.title == "Buy milk"
    assert invoker.can_undo() is True
    assert invoker.can_redo() is False


def test_undoing_every_execute_restores_initial_content(repo, observer, invoker) -> None:
    seed = repo.save({"title": "Seed", "type": "simple"})
    before = _snapshot(repo)

    created = invoker.execute(CreateTaskCommand("One", "simple", repo, observer))
    invoker.execute(UpdateTaskCommand(seed.id, {"title": "Changed", "completed": True}, repo))
    invoker.execute(UpdateTaskCommand(created.id, {"priority": "high"}, repo))
    invoker.execute(DeleteTaskCommand(seed.id, repo))
    invoker.execute(CreateTaskCommand("Two", "complex", repo, observer))

    for _ in range(5):
        assert invoker.undo() is True

    assert _snapshot(repo) == before
    assert invoker.can_undo() is False


def test_undo_redo_round_trip_for_create(repo, observer, invoker) -> None:
    invoker.execute(CreateTaskCommand("Buy milk", "simple", repo, observer))
    after = _content(repo)

    invoker.undo()
    assert repo.find_all() == []
    invoker.redo()

    assert _content(repo) == after


def test_undo_redo_round_trip_for_delete(repo, invoker) -> None:
    task = repo.save({"title": "Buy milk", "type": "simple"})
    invoker.execute(DeleteTaskCommand(task.id, repo))
    after = _snapshot(repo)

    invoker.undo()
    assert repo.find_by_id(task.id) == task
    invoker.redo()

    assert _snapshot(repo) == after


def test_undo_redo_round_trip_for_update(repo, invoker) -> None:
    task = repo.save({"title": "A", "type": "simple"})
    invoker.execute(UpdateTaskCommand(task.id, {"title": "B"}, repo))
    after = _snapshot(repo)

    invoker.undo()
    assert repo.find_by_id(task.id).title == "A"
    invoker.redo()

    assert _snapshot(repo) == after


def test_execute_after_undo_prunes_redo_branch(repo, observer, invoker) -> None:
    invoker.execute(CreateTaskCommand("One", "simple", repo, observer))
    invoker.execute(CreateTaskCommand("Two", "simple", repo, observer))
    invoker.undo()
    invoker.undo()
    assert invoker.can_redo() is True

    invoker.execute(CreateTaskCommand("Three", "simple", repo, observer))

    assert invoker.can_redo() is False
    assert invoker.redo() is False
    assert invoker.get_history() == ["0: CreateTaskCommand <- current"]
    assert [t.title for t in repo.find_all()] == ["Three"]


def test_command_without_undo_blocks_backward_traversal(repo, observer, invoker) -> None:
    invoker.execute(CreateTaskCommand("One", "simple", repo, observer))
    invoker.execute(QueryOnly())

    assert invoker.undo() is False
    assert invoker.can_undo() is True
    assert invoker.get_history()[-1] == "1: QueryOnly <- current"
    assert len(repo.find_all()) == 1


def test_failed_execute_is_not_recorded(invoker) -> None:
    class Boom:
        def execute(self) -> None:
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        invoker.execute(Boom())

    assert invoker.get_history() == []
    assert invoker.can_undo() is False


def test_history_marks_current_position(repo, observer, invoker) -> None:
    task = invoker.execute(CreateTaskCommand("One", "simple", repo, observer))
    invoker.execute(UpdateTaskCommand(task.id, {"title": "Uno"}, repo))
    invoker.undo()

    assert invoker.get_history() == [
        "0: CreateTaskCommand <- current",
        "1: UpdateTaskCommand",
    ]


def test_clear_history_resets_state(repo, observer, invoker) -> None:
    invoker.execute(CreateTaskCommand("One", "simple", repo, observer))
    invoker.undo()

    invoker.clear_history()

    assert invoker.can_undo() is False
    assert invoker.can_redo() is False
    assert invoker.get_history() == []


def test_registry_returns_same_invoker_per_session() -> None:
    registry = InvokerRegistry()

    assert registry.get("alice") is registry.get("alice")
    assert registry.get("alice") is not registry.get("bob")
    assert len(registry) == 2


def test_registry_drops_least_recently_used_session() -> None:
    registry = InvokerRegistry(max_sessions=2)
    alice = registry.get("alice")
    registry.get("bob")
    registry.get("alice")

    registry.get("carol")

    assert "bob" not in registry
    assert registry.get("alice") is alice
    assert len(registry) == 2


def test_registry_needs_room_for_one_session() -> None:
    with pytest.raises(ValueError):
        InvokerRegistry(max_sessions=0)
